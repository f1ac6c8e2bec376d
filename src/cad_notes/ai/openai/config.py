"""OpenAI API configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cad_notes.config import load_provider_settings


class OpenAISettings(BaseSettings):
    """Settings for OpenAI API integration.

    Attributes:
        api_key: OpenAI API key for authentication
        notes_model_name: Model used for structured notes generation
        ask_model_name: Model used for free-text follow-up questions
        temperature: Optional sampling temperature (0.0-2.0)
        request_timeout: HTTP request timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str = Field(
        ...,
        description="OpenAI API key",
    )
    notes_model_name: str = Field(
        default="gpt-4o",
        description="Model used for structured notes generation",
    )
    ask_model_name: str = Field(
        default="gpt-4o-mini",
        description="Model used for free-text follow-up questions",
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature; provider default when unset",
    )
    request_timeout: int = Field(
        default=300,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be blank")
        return value


@lru_cache
def get_openai_settings() -> OpenAISettings:
    """Get cached OpenAI settings instance.

    Returns:
        OpenAISettings: Cached settings instance

    Raises:
        MissingConfigurationError: If OPENAI_API_KEY is not set
    """
    return load_provider_settings(OpenAISettings)
