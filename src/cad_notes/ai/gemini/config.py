"""
Configuration management for the Gemini integration package.

This module handles environment variable configuration and validation
for Gemini integration using Pydantic settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cad_notes.config import load_provider_settings
from cad_notes.utils.logger import logger


class GeminiSettings(BaseSettings):
    """Configuration for Gemini integration using Pydantic settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="GEMINI_"
    )

    api_key: str = Field(description="Gemini API key for authentication")
    notes_model_name: str = Field(
        default="gemini-2.5-pro",
        description="Model used for structured notes generation",
    )
    ask_model_name: str = Field(
        default="gemini-2.5-flash",
        description="Model used for free-text follow-up questions",
    )
    temperature: float | None = Field(
        default=None, description="Temperature for content generation (0.0-2.0)"
    )
    timeout: int = Field(default=600, description="Request timeout in seconds")
    braintrust_project_name: str | None = Field(
        default=None,
        description="Braintrust project for tracing; tracing is off when unset",
    )

    @field_validator("api_key")
    @classmethod
    def api_key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api_key must not be blank")
        return value


_gemini_settings: GeminiSettings | None = None


def get_gemini_settings() -> GeminiSettings:
    """
    Get the global Gemini settings instance.

    Returns:
        GeminiSettings: The global settings instance

    Raises:
        MissingConfigurationError: If GEMINI_API_KEY is not set
    """
    global _gemini_settings
    if _gemini_settings is None:
        _gemini_settings = load_provider_settings(GeminiSettings)
        logger.info("Gemini settings loaded")
    return _gemini_settings


def set_gemini_settings(settings: GeminiSettings | None) -> None:
    """
    Set the global Gemini settings instance.

    Args:
        settings: The settings to set, or None to reload from the environment
    """
    global _gemini_settings
    _gemini_settings = settings
