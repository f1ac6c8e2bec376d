"""Model client implementations."""

from cad_notes.ai.base import ContentGenerationResult, ModelClient
from cad_notes.ai.factory import AIProviderType, create_model_client

__all__ = [
    "AIProviderType",
    "ContentGenerationResult",
    "ModelClient",
    "create_model_client",
]
