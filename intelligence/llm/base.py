"""
Base LLM
Abstract base class for model providers
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field
from enum import Enum


JSON_MIME_TYPE = "application/json"


class MessageRole(str, Enum):
    """Message role"""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class Message:
    """Conversation message"""
    role: MessageRole
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=MessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)


@dataclass
class LLMResponse:
    """LLM response"""
    content: str
    model: str
    usage: Dict[str, int] = field(default_factory=dict)  # prompt_tokens, completion_tokens, total_tokens
    finish_reason: Optional[str] = None
    raw_response: Optional[Any] = None


class BaseLLM(ABC):
    """
    Abstract LLM base class

    Every provider implementation subclasses this.
    """

    def __init__(
        self,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        timeout: float = 60.0,
        **kwargs,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.extra_config = kwargs

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider name"""
        pass

    @abstractmethod
    async def acomplete(
        self,
        messages: List[Message],
        response_schema: Optional[Dict[str, Any]] = None,
        response_mime_type: Optional[str] = None,
        **kwargs,
    ) -> LLMResponse:
        """
        Generate a response asynchronously

        Args:
            messages: conversation messages
            response_schema: structured-output schema the reply must match
            response_mime_type: reply MIME type (``application/json`` for structured output)
            **kwargs: per-call overrides (temperature, max_tokens)

        Returns:
            LLMResponse
        """
        pass

    def complete(
        self,
        messages: List[Message],
        response_schema: Optional[Dict[str, Any]] = None,
        response_mime_type: Optional[str] = None,
        **kwargs,
    ) -> LLMResponse:
        """Synchronous wrapper around ``acomplete``"""
        import asyncio
        return asyncio.run(
            self.acomplete(messages, response_schema, response_mime_type, **kwargs)
        )

    async def achat(self, user_message: str, system_prompt: Optional[str] = None) -> str:
        """Plain-text single-turn chat"""
        messages = []
        if system_prompt:
            messages.append(Message.system(system_prompt))
        messages.append(Message.user(user_message))

        response = await self.acomplete(messages)
        return response.content

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model}, provider={self.provider})"
