from __future__ import annotations

import asyncio

import pytest

from config import DEFAULT_GEMINI_MODEL, LLMSettings, get_llm_settings, get_settings
from intelligence.llm import GeminiLLM, get_llm
from intelligence.llm.base import JSON_MIME_TYPE, LLMResponse, Message
from intelligence.schema_builder import build_trend_schema
from core import OutputFormat
from utils.exceptions import ConfigurationError


_KEY_VARS = ("LLM_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY", "LLM_MODEL_NAME", "LLM_PROVIDER")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in _KEY_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_llm_settings_defaults(clean_env):
    settings = LLMSettings()
    assert settings.provider == "gemini"
    assert settings.gemini_api_key is None
    assert settings.model_name is None


@pytest.mark.parametrize("env_name", ["LLM_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"])
def test_api_key_env_aliases(clean_env, env_name):
    clean_env.setenv(env_name, "key-123")
    assert LLMSettings().gemini_api_key == "key-123"


def test_api_key_read_from_working_directory_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("GEMINI_API_KEY=from-dotenv\nLLM_MODEL_NAME=gemini-2.5-pro\n", encoding="utf-8")

    settings = get_llm_settings()

    assert settings.gemini_api_key == "from-dotenv"
    assert settings.model_name == "gemini-2.5-pro"
    assert get_llm().api_key == "from-dotenv"


def test_environment_overrides_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("GEMINI_API_KEY=from-dotenv\n", encoding="utf-8")
    clean_env.setenv("GEMINI_API_KEY", "from-env")

    assert LLMSettings().gemini_api_key == "from-env"


def test_missing_api_key_is_a_configuration_error(clean_env):
    with pytest.raises(ConfigurationError) as excinfo:
        get_llm()
    assert "API key" in excinfo.value.message


def test_unknown_provider_is_a_configuration_error(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "key-123")
    with pytest.raises(ConfigurationError):
        get_llm(provider="openai")


def test_get_llm_builds_gemini_from_settings(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "key-123")
    clean_env.setenv("LLM_TEMPERATURE", "0.2")

    llm = get_llm()

    assert isinstance(llm, GeminiLLM)
    assert llm.model == DEFAULT_GEMINI_MODEL
    assert llm.api_key == "key-123"
    assert llm.temperature == 0.2


def test_get_llm_arguments_override_settings(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "key-123")
    llm = get_llm(model="gemini-2.5-pro", api_key="other", temperature=0.0)
    assert llm.model == "gemini-2.5-pro"
    assert llm.api_key == "other"
    assert llm.temperature == 0.0


def test_gemini_generation_config_for_structured_output():
    llm = GeminiLLM(api_key="k", temperature=0.3, max_tokens=1000)
    schema = build_trend_schema(OutputFormat.AGGREGATED)

    config = llm._generation_config(schema, JSON_MIME_TYPE)

    assert config == {
        "temperature": 0.3,
        "max_output_tokens": 1000,
        "response_mime_type": JSON_MIME_TYPE,
        "response_schema": schema,
    }
    assert "response_schema" not in llm._generation_config(None, None)


def test_gemini_message_conversion():
    llm = GeminiLLM(api_key="k")
    system, history, last = llm._convert_messages(
        [Message.system("rules"), Message.user("hi"), Message.assistant("hello"), Message.user("trends?")]
    )
    assert system == "rules"
    assert history == [
        {"role": "user", "parts": ["hi"]},
        {"role": "model", "parts": ["hello"]},
    ]
    assert last == "trends?"


class _EchoLLM(GeminiLLM):
    async def acomplete(self, messages, response_schema=None, response_mime_type=None, **kwargs):
        text = " | ".join(f"{m.role.value}:{m.content}" for m in messages)
        return LLMResponse(content=text, model=self.model)


def test_sync_complete_and_chat_helpers():
    llm = _EchoLLM(api_key="k")

    assert llm.complete([Message.user("ping")]).content == "user:ping"
    assert llm.provider == "gemini"
    assert "provider=gemini" in repr(llm)

    reply = asyncio.run(llm.achat("trends?", system_prompt="be brief"))
    assert reply == "system:be brief | user:trends?"
