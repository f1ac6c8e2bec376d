"""Factory for creating model client instances."""

from enum import Enum

from cad_notes.ai.base import ModelClient
from cad_notes.config import get_app_settings
from cad_notes.utils.logger import logger


class AIProviderType(str, Enum):
    """Available AI provider types."""

    OPENAI = "openai"
    GEMINI = "gemini"


def create_model_client(
    provider_type: AIProviderType | str | None = None,
) -> ModelClient:
    """Create a model client with its provider settings loaded from the environment.

    Args:
        provider_type: Type of provider to create. If None, uses the AI_PROVIDER
                      setting (defaults to Gemini).

    Returns:
        ModelClient: Instance of the specified provider's client

    Raises:
        MissingConfigurationError: If the provider's API key is not configured
        ValueError: If provider type is not supported
    """
    if provider_type is None:
        provider_type = get_app_settings().ai_provider

    if isinstance(provider_type, str):
        provider_type = AIProviderType(provider_type.lower())

    logger.info(f"Creating model client: {provider_type.value}")

    if provider_type == AIProviderType.OPENAI:
        from cad_notes.ai.openai.client import OpenAIClient
        from cad_notes.ai.openai.config import get_openai_settings

        return OpenAIClient(settings=get_openai_settings())
    elif provider_type == AIProviderType.GEMINI:
        from cad_notes.ai.gemini.client import GeminiClient
        from cad_notes.ai.gemini.config import get_gemini_settings

        return GeminiClient(settings=get_gemini_settings())
    else:
        raise ValueError(f"Unsupported AI provider: {provider_type}")
