"""Canonical data contracts for trend analysis requests and results."""

from __future__ import annotations

from enum import Enum
import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


AGGREGATED_PLATFORM = "Aggregated"


class OutputFormat(str, Enum):
    """Shape of the analysis result."""

    AGGREGATED = "aggregated"
    PER_PLATFORM = "per-platform"


class AnalysisErrorKind(str, Enum):
    """User-facing failure categories."""

    NO_PLATFORM_SELECTED = "no_platform_selected"
    ANALYSIS_FAILED = "analysis_failed"


class PlatformToggle(BaseModel):
    """One selectable social platform."""

    id: str
    name: str
    selected: bool = False


class TrendRequest(BaseModel):
    """Canonical trend analysis request."""

    platforms: List[str] = Field(default_factory=list)
    topic: str = ""
    month: str = ""
    day: str = ""
    output_format: OutputFormat = OutputFormat.PER_PLATFORM

    @field_validator("topic", "month", "day", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return str(value or "").strip()


class Keyword(BaseModel):
    keyword: str = ""
    viral_percentage: float = 0.0

    @field_validator("viral_percentage", mode="after")
    @classmethod
    def _clamp_percentage(cls, value: float) -> float:
        if math.isnan(value) or value < 0.0:
            return 0.0
        if value > 100.0:
            return 100.0
        return value


class VerifiedResource(BaseModel):
    description: str = ""
    url: str = ""


class TrendingTopic(BaseModel):
    """A trending topic with its supporting signals, lists ordered by impact."""

    topic: str = ""
    keywords: List[Keyword] = Field(default_factory=list)
    hashtags: List[str] = Field(default_factory=list)
    popular_audio: List[str] = Field(default_factory=list)
    verified_resources: List[VerifiedResource] = Field(default_factory=list)


class TimeFrame(BaseModel):
    month: Optional[str] = None
    day: Optional[str] = None


class TrendAnalysisResult(BaseModel):
    """Analysis for one platform, or for all of them under ``Aggregated``."""

    platform: str = ""
    time_frame: TimeFrame = Field(default_factory=TimeFrame)
    selected_topic: str = ""
    trending_topics: List[TrendingTopic] = Field(default_factory=list)
    error: Optional[str] = None

    @field_validator("trending_topics", mode="before")
    @classmethod
    def _null_topics(cls, value: Any) -> Any:
        return [] if value is None else value


TrendPayload = Union[TrendAnalysisResult, List[TrendAnalysisResult]]


class AnalysisOutcome(BaseModel):
    """
    Result of one ``analyze`` call.

    Carries the payload (shaped by ``output_format``), a hard error, or a
    soft "no data" advisory alongside a successful payload.
    """

    output_format: OutputFormat
    result: Optional[TrendPayload] = None
    error: Optional[str] = None
    error_kind: Optional[AnalysisErrorKind] = None
    no_data: bool = False
    advisory: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @property
    def is_aggregated(self) -> bool:
        return self.ok and self.output_format == OutputFormat.AGGREGATED

    @property
    def is_per_platform(self) -> bool:
        return self.ok and self.output_format == OutputFormat.PER_PLATFORM

    @property
    def results(self) -> List[TrendAnalysisResult]:
        """The payload as a list regardless of shape."""
        if self.result is None:
            return []
        if isinstance(self.result, list):
            return list(self.result)
        return [self.result]
