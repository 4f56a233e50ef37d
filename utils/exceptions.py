"""
Custom Exceptions
Error taxonomy for trend analysis requests
"""


class TrendscopeError(Exception):
    """Base exception for the trend analysis service"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(TrendscopeError):
    """Missing or invalid configuration (fatal at startup)"""
    pass


class RequestValidationError(TrendscopeError):
    """Invalid user input, reported verbatim"""
    pass


class NoPlatformSelectedError(RequestValidationError):
    """No social platform toggled on"""

    DEFAULT_MESSAGE = "Please select at least one social media platform."

    def __init__(self, message: str = DEFAULT_MESSAGE, **kwargs):
        super().__init__(message, kwargs)


class LLMError(TrendscopeError):
    """LLM call error"""

    def __init__(self, message: str, provider: str = None, **kwargs):
        super().__init__(message, kwargs)
        self.provider = provider


class LLMResponseError(LLMError):
    """The model replied, but the reply is unusable"""
    pass


class MalformedResponseError(LLMResponseError):
    """Reply text is not JSON"""
    pass


class UnexpectedResponseShapeError(LLMResponseError):
    """Reply is JSON but lacks the `result` wrapper or the requested shape"""
    pass


class AnalysisFailedError(TrendscopeError):
    """
    Generic user-facing failure.

    The underlying cause is chained and logged, never shown to the user.
    """

    DEFAULT_MESSAGE = (
        "Failed to analyze trends. The AI model may be overloaded or the request is invalid."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, **kwargs):
        super().__init__(message, kwargs)
