"""
Configuration Management Module
Environment-driven settings for the model client
"""
from .settings import (
    DEFAULT_GEMINI_MODEL,
    LLMSettings,
    Settings,
    get_settings,
    get_llm_settings,
)

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "LLMSettings",
    "Settings",
    "get_settings",
    "get_llm_settings",
]
