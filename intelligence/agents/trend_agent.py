"""
Trend Analyst Agent
One structured-output model call per request, unwrapped into domain types.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
import json
import logging
import re

from pydantic import TypeAdapter, ValidationError

from core import OutputFormat, TrendAnalysisResult, TrendPayload, TrendRequest
from intelligence.llm import BaseLLM, JSON_MIME_TYPE, Message, get_llm
from intelligence.prompts import build_trend_prompt
from intelligence.schema_builder import RESULT_KEY, build_trend_schema
from utils.exceptions import (
    AnalysisFailedError,
    MalformedResponseError,
    UnexpectedResponseShapeError,
)


logger = logging.getLogger(__name__)

_RESULT_LIST = TypeAdapter(List[TrendAnalysisResult])


class TrendAnalystAgent:
    """Model query adapter for trend analysis."""

    def __init__(self, llm: Optional[BaseLLM] = None):
        self.llm = llm or get_llm()

    @staticmethod
    def _parse_json(text: str) -> Any:
        raw = (text or "").strip()
        if not raw:
            raise MalformedResponseError("Empty model reply")
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass
        match = re.search(r"\{[\s\S]*\}", raw)
        if not match:
            raise MalformedResponseError("Model reply is not JSON", snippet=raw[:200])
        try:
            return json.loads(match.group())
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                "Model reply is not JSON", snippet=raw[:200], reason=str(exc)
            ) from exc

    @staticmethod
    def _unwrap(parsed: Any) -> Any:
        if not isinstance(parsed, dict) or parsed.get(RESULT_KEY) is None:
            keys = sorted(parsed) if isinstance(parsed, dict) else type(parsed).__name__
            raise UnexpectedResponseShapeError(
                "Unexpected API response structure", keys=keys
            )
        return parsed[RESULT_KEY]

    @staticmethod
    def _to_domain(result: Any, output_format: OutputFormat) -> TrendPayload:
        try:
            if output_format == OutputFormat.PER_PLATFORM:
                return _RESULT_LIST.validate_python(result)
            return TrendAnalysisResult.model_validate(result)
        except ValidationError as exc:
            raise UnexpectedResponseShapeError(
                f"Reply does not match the {output_format.value} shape",
                errors=exc.error_count(),
            ) from exc

    def parse_reply(self, text: str, output_format: OutputFormat) -> TrendPayload:
        """Parse, unwrap and validate a raw model reply."""
        parsed = self._parse_json(text)
        return self._to_domain(self._unwrap(parsed), output_format)

    def build_call(self, request: TrendRequest) -> Dict[str, Any]:
        """Arguments for the single model call."""
        return {
            "messages": [Message.user(build_trend_prompt(request))],
            "response_schema": build_trend_schema(request.output_format),
            "response_mime_type": JSON_MIME_TYPE,
        }

    async def fetch_trends(self, request: TrendRequest) -> TrendPayload:
        """
        Query the model and return the unwrapped result.

        Returns a list in per-platform mode and a single object in
        aggregated mode, as decided by ``request.output_format`` alone.

        Raises:
            AnalysisFailedError: any transport, parse or shape failure; the
                cause is logged and chained.
        """
        call = self.build_call(request)
        try:
            response = await self.llm.acomplete(**call)
            return self.parse_reply(response.content, request.output_format)
        except Exception as exc:
            logger.error(
                "Error fetching trending data from %s: %s",
                getattr(self.llm, "provider", "llm"),
                exc,
                exc_info=True,
            )
            raise AnalysisFailedError(
                platforms=list(request.platforms),
                output_format=request.output_format.value,
            ) from exc
