"""
Intelligence Module
Model abstraction, prompt/schema construction and the trend analysis adapter
"""
from .llm import BaseLLM, GeminiLLM, get_llm
from .normalizer import default_platforms, normalize_request
from .prompts import build_trend_prompt
from .schema_builder import build_trend_schema, trend_analysis_object_schema
from .agents import TrendAnalystAgent
from .pipeline import NO_DATA_ADVISORY, analyze, is_empty_result

__all__ = [
    # LLM
    "BaseLLM",
    "GeminiLLM",
    "get_llm",
    # Request
    "default_platforms",
    "normalize_request",
    # Prompt / schema
    "build_trend_prompt",
    "build_trend_schema",
    "trend_analysis_object_schema",
    # Agents
    "TrendAnalystAgent",
    # Pipeline
    "NO_DATA_ADVISORY",
    "analyze",
    "is_empty_result",
]
