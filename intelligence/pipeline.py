"""
Analysis entry point.

``analyze`` is the only operation the presentation layer calls. It never
raises for request-level problems; failures and the "nothing found"
advisory come back on the AnalysisOutcome.
"""

from __future__ import annotations

from typing import Optional
import logging

from core import (
    AnalysisErrorKind,
    AnalysisOutcome,
    TrendAnalysisResult,
    TrendPayload,
    TrendRequest,
)
from intelligence.agents.trend_agent import TrendAnalystAgent
from utils.exceptions import AnalysisFailedError, NoPlatformSelectedError


logger = logging.getLogger(__name__)

NO_DATA_ADVISORY = (
    "Analysis complete, but no specific trending topics were found for your query. "
    "Try broadening your search."
)


def is_empty_result(result: TrendPayload) -> bool:
    """Empty list, or a single result without trending topics."""
    if isinstance(result, list):
        return len(result) == 0
    if isinstance(result, TrendAnalysisResult):
        return not result.trending_topics
    return True


def _failure(request: TrendRequest, kind: AnalysisErrorKind, message: str) -> AnalysisOutcome:
    return AnalysisOutcome(
        output_format=request.output_format,
        result=None,
        error=message,
        error_kind=kind,
    )


async def analyze(
    request: TrendRequest,
    agent: Optional[TrendAnalystAgent] = None,
) -> AnalysisOutcome:
    """
    Run one trend analysis.

    Args:
        request: canonical request
        agent: adapter to use; built from settings when omitted. Building it
            raises ConfigurationError if no API key is configured.

    Returns:
        AnalysisOutcome with the payload, or with ``error``/``error_kind``
        set and no payload.
    """
    if not request.platforms:
        return _failure(
            request,
            AnalysisErrorKind.NO_PLATFORM_SELECTED,
            NoPlatformSelectedError.DEFAULT_MESSAGE,
        )

    agent = agent or TrendAnalystAgent()

    try:
        result = await agent.fetch_trends(request)
    except AnalysisFailedError as exc:
        return _failure(request, AnalysisErrorKind.ANALYSIS_FAILED, exc.message)

    if is_empty_result(result):
        logger.info("Analysis for %s returned no trending topics", ", ".join(request.platforms))
        return AnalysisOutcome(
            output_format=request.output_format,
            result=result,
            no_data=True,
            advisory=NO_DATA_ADVISORY,
        )

    logger.info("Validation successful: received structured data from AI analysis")
    return AnalysisOutcome(output_format=request.output_format, result=result)
