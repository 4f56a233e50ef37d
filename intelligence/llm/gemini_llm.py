"""
Google Gemini LLM
Structured JSON generation against Gemini models
"""
from typing import Any, Dict, List, Optional
import logging

from config import DEFAULT_GEMINI_MODEL

from .base import BaseLLM, JSON_MIME_TYPE, Message, MessageRole, LLMResponse


logger = logging.getLogger(__name__)


class GeminiLLM(BaseLLM):
    """
    Google Gemini LLM implementation

    Supported models include:
    - gemini-2.5-flash (default)
    - gemini-2.5-pro
    - gemini-2.0-flash
    """

    def __init__(
        self,
        model: str = DEFAULT_GEMINI_MODEL,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 8192,
        timeout: float = 60.0,
        **kwargs,
    ):
        super().__init__(model, temperature, max_tokens, timeout, **kwargs)
        self.api_key = api_key

    @property
    def provider(self) -> str:
        return "gemini"

    def _convert_messages(self, messages: List[Message]) -> tuple:
        """
        Convert messages to the Gemini chat format

        Returns:
            (system_instruction, history, last_message)
        """
        system_instruction = None
        history = []
        last_message = None

        for msg in messages:
            if msg.role == MessageRole.SYSTEM:
                system_instruction = msg.content
            elif msg.role == MessageRole.USER:
                last_message = msg.content
            elif msg.role == MessageRole.ASSISTANT:
                if last_message:
                    history.append({"role": "user", "parts": [last_message]})
                    last_message = None
                history.append({"role": "model", "parts": [msg.content]})

        return system_instruction, history, last_message

    def _generation_config(
        self,
        response_schema: Optional[Dict[str, Any]],
        response_mime_type: Optional[str],
        **kwargs,
    ) -> Dict[str, Any]:
        config: Dict[str, Any] = {
            "temperature": kwargs.get("temperature", self.temperature),
            "max_output_tokens": kwargs.get("max_tokens", self.max_tokens),
        }
        if response_schema is not None:
            config["response_mime_type"] = response_mime_type or JSON_MIME_TYPE
            config["response_schema"] = response_schema
        elif response_mime_type:
            config["response_mime_type"] = response_mime_type
        return config

    async def acomplete(
        self,
        messages: List[Message],
        response_schema: Optional[Dict[str, Any]] = None,
        response_mime_type: Optional[str] = None,
        **kwargs,
    ) -> LLMResponse:
        """Generate a response asynchronously"""
        import google.generativeai as genai

        genai.configure(api_key=self.api_key)

        system_instruction, history, last_message = self._convert_messages(messages)

        model = genai.GenerativeModel(
            model_name=self.model,
            generation_config=self._generation_config(
                response_schema, response_mime_type, **kwargs
            ),
            system_instruction=system_instruction,
        )

        chat = model.start_chat(history=history)
        response = await chat.send_message_async(
            last_message or "",
            request_options={"timeout": kwargs.get("timeout", self.timeout)},
        )

        content = response.text if response.text else ""

        usage = {}
        if getattr(response, "usage_metadata", None):
            usage = {
                "prompt_tokens": response.usage_metadata.prompt_token_count,
                "completion_tokens": response.usage_metadata.candidates_token_count,
                "total_tokens": response.usage_metadata.total_token_count,
            }
            logger.debug("Gemini usage for %s: %s", self.model, usage)

        return LLMResponse(
            content=content,
            model=self.model,
            usage=usage,
            finish_reason=response.candidates[0].finish_reason.name if response.candidates else None,
            raw_response=response,
        )
