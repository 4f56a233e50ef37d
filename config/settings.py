"""
Settings Configuration
Pydantic-based configuration loading and validation
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

# Later files win; process environment variables win over both
ENV_FILES = (str(Path(__file__).parent / ".env"), ".env")


class LLMSettings(BaseSettings):
    """LLM configuration"""
    provider: str = Field(default="gemini", description="LLM provider (only gemini is supported)")
    model_name: Optional[str] = Field(default=None, description="Model name (falls back to the provider default)")
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_tokens: int = Field(default=8192, description="Maximum output tokens")
    timeout: float = Field(default=60.0, description="Request timeout (seconds)")

    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("LLM_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Google Gemini API Key",
    )

    class Config:
        env_prefix = "LLM_"
        env_file = ENV_FILES
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


class Settings(BaseSettings):
    """Top-level settings aggregating every sub-config"""

    llm: LLMSettings = Field(default_factory=LLMSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @classmethod
    def load_from_env_file(cls, env_path: Optional[Path] = None) -> "Settings":
        """Load settings, reading ``config/.env`` first when present"""
        if env_path is None:
            env_path = Path(__file__).parent / ".env"

        if env_path.exists():
            from dotenv import load_dotenv
            load_dotenv(env_path)

        return cls(llm=LLMSettings())


@lru_cache()
def get_settings() -> Settings:
    """Global settings singleton"""
    return Settings.load_from_env_file()


def get_llm_settings() -> LLMSettings:
    return get_settings().llm
