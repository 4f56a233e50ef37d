"""
LLM Factory
Builds the configured LLM instance
"""
from typing import Optional
import logging

from config import DEFAULT_GEMINI_MODEL, get_llm_settings
from utils.exceptions import ConfigurationError

from .base import BaseLLM
from .gemini_llm import GeminiLLM


logger = logging.getLogger(__name__)


DEFAULT_MODELS = {
    "gemini": DEFAULT_GEMINI_MODEL,
}


def get_llm(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    **kwargs,
) -> BaseLLM:
    """
    Get an LLM instance

    Reads settings from the environment / .env; arguments override them.

    Args:
        provider: LLM provider (only ``gemini``)
        model: model name (provider default when omitted)
        **kwargs: extra parameters (api_key, temperature, max_tokens, timeout)

    Returns:
        BaseLLM instance

    Raises:
        ConfigurationError: unknown provider or missing API key. This is a
            startup failure, not a per-query one.

    Example:
        llm = get_llm()
        llm = get_llm(model="gemini-2.5-pro", temperature=0.2)
    """
    settings = get_llm_settings()

    provider = provider or settings.provider
    if provider not in DEFAULT_MODELS:
        raise ConfigurationError(
            f"Unsupported LLM provider: {provider}",
            {"supported": sorted(DEFAULT_MODELS)},
        )

    model = model or settings.model_name or DEFAULT_MODELS[provider]

    api_key = kwargs.pop("api_key", None) or settings.gemini_api_key
    if not api_key:
        raise ConfigurationError(
            "Gemini API key is not set",
            {"env": "LLM_GEMINI_API_KEY"},
        )

    default_params = {
        "temperature": settings.temperature,
        "max_tokens": settings.max_tokens,
        "timeout": settings.timeout,
    }
    for key, value in default_params.items():
        if key not in kwargs:
            kwargs[key] = value

    logger.debug("Creating %s LLM with model %s", provider, model)
    return GeminiLLM(
        model=model,
        api_key=api_key,
        **kwargs,
    )
