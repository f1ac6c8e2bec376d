"""Base classes for the model client abstraction."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class ContentGenerationResult(BaseModel):
    """Result from content generation."""

    text: str
    model: str | None = None
    usage: dict[str, Any] | None = None
    finish_reason: str | None = None


class ModelClient(ABC):
    """Capability interface for hosted text-generation models.

    The notes service only needs two call shapes: a structured call that
    returns JSON conforming to a schema, and a plain free-text call. Each
    provider implements both so the service can be swapped across providers
    and tested against a fake.
    """

    @abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        response_schema: type[BaseModel],
        model: str | None = None,
    ) -> ContentGenerationResult:
        """Generate JSON text conforming to a schema.

        Args:
            prompt: Text prompt for generation
            response_schema: Pydantic model whose JSON schema constrains the output
            model: Model name override (defaults to the provider's notes model)

        Returns:
            ContentGenerationResult: Raw JSON text and metadata

        Raises:
            ModelInvocationError: If the call to the model service fails
        """
        pass

    @abstractmethod
    async def generate_text(
        self, prompt: str, model: str | None = None
    ) -> ContentGenerationResult:
        """Generate free text.

        Args:
            prompt: Text prompt for generation
            model: Model name override (defaults to the provider's ask model)

        Returns:
            ContentGenerationResult: Generated text and metadata

        Raises:
            ModelInvocationError: If the call to the model service fails
        """
        pass
