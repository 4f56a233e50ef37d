"""
Utils Module
Shared helpers: logging and the exception taxonomy
"""
from .logger import setup_logger, get_logger
from .exceptions import (
    TrendscopeError,
    ConfigurationError,
    RequestValidationError,
    NoPlatformSelectedError,
    LLMError,
    LLMResponseError,
    MalformedResponseError,
    UnexpectedResponseShapeError,
    AnalysisFailedError,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "TrendscopeError",
    "ConfigurationError",
    "RequestValidationError",
    "NoPlatformSelectedError",
    "LLMError",
    "LLMResponseError",
    "MalformedResponseError",
    "UnexpectedResponseShapeError",
    "AnalysisFailedError",
]
