from enum import Enum

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cad_notes.exceptions import MissingConfigurationError


class Environment(str, Enum):
    """Application environments."""

    DEVELOPMENT = "dev"
    STAGING = "staging"
    PRODUCTION = "prod"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current environment (dev, staging, or prod)",
    )
    ai_provider: str = Field(
        default="gemini",
        description="Model provider backing the notes service (gemini or openai)",
    )
    default_material: str = Field(
        default="Aluminum 6061-T6",
        description="Material pre-filled in a new session",
    )
    default_finish: str = Field(
        default="Anodize Black, MIL-A-8625 Type II",
        description="Finish pre-filled in a new session",
    )
    copied_indicator_seconds: float = Field(
        default=2.0,
        gt=0,
        description="How long the 'Copied!' indicator stays visible",
    )
    max_sessions: int = Field(
        default=1000,
        gt=0,
        description="Maximum number of browser sessions held in memory",
    )
    session_cookie_name: str = Field(
        default="cad_notes_session",
        description="Cookie carrying the browser session id",
    )
    host: str = Field(default="127.0.0.1", description="Bind address for the server")
    port: int = Field(default=8080, description="Port for the server")


_app_settings: AppSettings | None = None


def get_app_settings() -> AppSettings:
    global _app_settings
    if _app_settings is None:
        _app_settings = AppSettings()
    return _app_settings


def load_provider_settings(settings_cls: type[BaseSettings]) -> BaseSettings:
    """Instantiate provider settings, turning validation failures into a fatal error.

    Args:
        settings_cls: The pydantic settings class to load from the environment

    Returns:
        BaseSettings: The loaded settings instance

    Raises:
        MissingConfigurationError: If a required value is absent or invalid
    """
    try:
        return settings_cls()
    except ValidationError as e:
        prefix = (settings_cls.model_config.get("env_prefix") or "").upper()
        fields = ", ".join(
            prefix + ".".join(str(part) for part in error["loc"]).upper()
            for error in e.errors()
        )
        raise MissingConfigurationError(
            f"Missing or invalid configuration: {fields}"
        ) from e
