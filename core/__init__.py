"""Core contracts and shared types for trend analysis."""

from .contracts import (
    AGGREGATED_PLATFORM,
    AnalysisErrorKind,
    AnalysisOutcome,
    Keyword,
    OutputFormat,
    PlatformToggle,
    TimeFrame,
    TrendAnalysisResult,
    TrendingTopic,
    TrendPayload,
    TrendRequest,
    VerifiedResource,
)

__all__ = [
    "AGGREGATED_PLATFORM",
    "AnalysisErrorKind",
    "AnalysisOutcome",
    "Keyword",
    "OutputFormat",
    "PlatformToggle",
    "TimeFrame",
    "TrendAnalysisResult",
    "TrendingTopic",
    "TrendPayload",
    "TrendRequest",
    "VerifiedResource",
]
