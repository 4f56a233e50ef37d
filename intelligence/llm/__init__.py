"""
LLM Module
Model provider abstraction
"""
from .base import BaseLLM, JSON_MIME_TYPE, LLMResponse, Message, MessageRole
from .gemini_llm import GeminiLLM
from .factory import get_llm

__all__ = [
    "BaseLLM",
    "JSON_MIME_TYPE",
    "LLMResponse",
    "Message",
    "MessageRole",
    "GeminiLLM",
    "get_llm",
]
