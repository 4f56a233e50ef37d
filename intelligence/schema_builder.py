"""
Structured-output schemas for the trend analysis reply.

Schemas use the OpenAPI subset accepted by Gemini's ``response_schema``.
Both output formats share one object schema and differ only in how it is
wrapped under the fixed ``result`` key.
"""

from __future__ import annotations

from typing import Any, Dict

from core import AGGREGATED_PLATFORM, OutputFormat


RESULT_KEY = "result"


def _string(description: str = "", nullable: bool = False) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "STRING"}
    if description:
        schema["description"] = description
    if nullable:
        schema["nullable"] = True
    return schema


def _array(items: Dict[str, Any], description: str = "") -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "ARRAY", "items": items}
    if description:
        schema["description"] = description
    return schema


def _keyword_schema() -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "keyword": _string(),
            "viral_percentage": {
                "type": "NUMBER",
                "description": "Potential to drive high engagement, between 0 and 100.",
            },
        },
        "required": ["keyword", "viral_percentage"],
    }


def _verified_resource_schema() -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "description": _string(),
            "url": _string(),
        },
        "required": ["description", "url"],
    }


def _trending_topic_schema() -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": {
            "topic": _string(),
            "keywords": _array(_keyword_schema(), "Sorted by descending impact."),
            "hashtags": _array(_string(), "Sorted by descending impact."),
            "popular_audio": _array(_string()),
            "verified_resources": _array(_verified_resource_schema()),
        },
        "required": ["topic", "keywords", "hashtags", "popular_audio", "verified_resources"],
    }


def trend_analysis_object_schema() -> Dict[str, Any]:
    """Schema of one TrendAnalysisResult object."""
    return {
        "type": "OBJECT",
        "properties": {
            "platform": _string(
                "The social media platform name. For aggregated results, "
                f'use "{AGGREGATED_PLATFORM}".'
            ),
            "time_frame": {
                "type": "OBJECT",
                "properties": {
                    "month": _string(nullable=True),
                    "day": _string(nullable=True),
                },
            },
            "selected_topic": _string(),
            "trending_topics": _array(_trending_topic_schema()),
            "error": _string(
                "Why data is unavailable for this platform, or null.",
                nullable=True,
            ),
        },
        "required": ["platform", "time_frame", "selected_topic", "trending_topics"],
    }


def build_trend_schema(output_format: OutputFormat) -> Dict[str, Any]:
    """Wrap the object schema under ``result`` as an array or a single object."""
    item = trend_analysis_object_schema()
    if OutputFormat(output_format) == OutputFormat.PER_PLATFORM:
        result = _array(item)
    else:
        result = item
    return {
        "type": "OBJECT",
        "properties": {RESULT_KEY: result},
        "required": [RESULT_KEY],
    }
