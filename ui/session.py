"""
Trend Session
Form and result state for one user, with a single in-flight query.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import logging

from core import AnalysisOutcome, OutputFormat, PlatformToggle, TrendPayload
from intelligence.agents.trend_agent import TrendAnalystAgent
from intelligence.normalizer import default_platforms, normalize_request
from intelligence.pipeline import analyze
from utils.exceptions import NoPlatformSelectedError


logger = logging.getLogger(__name__)


@dataclass
class TrendSession:
    """Selection state plus the outcome of the last query."""

    agent: TrendAnalystAgent
    platforms: List[PlatformToggle] = field(default_factory=default_platforms)
    topic: str = "AI videos"
    month: str = ""
    day: str = ""
    output_format: OutputFormat = OutputFormat.PER_PLATFORM

    is_loading: bool = False
    error: Optional[str] = None
    advisory: Optional[str] = None
    results: Optional[TrendPayload] = None
    last_outcome: Optional[AnalysisOutcome] = None

    @property
    def has_selection(self) -> bool:
        return any(p.selected for p in self.platforms)

    @property
    def is_aggregated_result(self) -> bool:
        return self.results is not None and not isinstance(self.results, list)

    @property
    def is_per_platform_result(self) -> bool:
        return self.results is not None and isinstance(self.results, list)

    def toggle_platform(self, platform_id: str) -> None:
        self.platforms = [
            p.model_copy(update={"selected": not p.selected}) if p.id == platform_id else p
            for p in self.platforms
        ]

    async def analyze_trends(self) -> Optional[AnalysisOutcome]:
        """
        Submit the current selection.

        Returns None without querying when a query is already outstanding or
        no platform is selected.
        """
        if self.is_loading:
            logger.debug("Query already in flight, ignoring submit")
            return None

        try:
            request = normalize_request(
                self.platforms,
                topic=self.topic,
                month=self.month,
                day=self.day,
                output_format=self.output_format,
            )
        except NoPlatformSelectedError as exc:
            self.error = exc.message
            self.advisory = None
            self.results = None
            self.last_outcome = None
            return None

        self.is_loading = True
        self.error = None
        self.advisory = None
        self.results = None

        try:
            outcome = await analyze(request, agent=self.agent)
        finally:
            self.is_loading = False

        self.last_outcome = outcome
        if outcome.ok:
            self.results = outcome.result
            self.advisory = outcome.advisory
        else:
            self.error = outcome.error
        return outcome
