"""OpenAI Responses API client implementation."""

from typing import Any

import httpx
import openai
from openai import AsyncOpenAI
from openai.types.responses import Response
from pydantic import BaseModel

from cad_notes.ai.base import ContentGenerationResult, ModelClient
from cad_notes.ai.openai.config import OpenAISettings
from cad_notes.ai.openai.exceptions import (
    OpenAIAuthenticationError,
    OpenAIContentGenerationError,
)
from cad_notes.utils.logger import logger


def strict_json_schema(response_schema: type[BaseModel]) -> dict[str, Any]:
    """Build a strict-mode JSON schema from a flat Pydantic model.

    Strict structured outputs require every property to be listed as
    required and additional properties to be forbidden.
    """
    schema = response_schema.model_json_schema()
    schema["required"] = list(schema.get("properties", {}))
    schema["additionalProperties"] = False
    return schema


class OpenAIClient(ModelClient):
    """OpenAI implementation of the model client using the Responses API."""

    def __init__(self, settings: OpenAISettings):
        """Initialize OpenAI client.

        Args:
            settings: OpenAI settings instance with API configuration
        """
        self.settings = settings
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the OpenAI client."""
        if self._client is None:
            try:
                timeout = httpx.Timeout(
                    timeout=self.settings.request_timeout,
                    connect=10.0,
                )
                self._client = AsyncOpenAI(
                    api_key=self.settings.api_key,
                    timeout=timeout,
                )
                logger.info(
                    "[OPENAI] Client initialized",
                    timeout_seconds=self.settings.request_timeout,
                )
            except Exception as e:
                logger.error("[OPENAI] Failed to initialize client", error=str(e))
                raise OpenAIAuthenticationError(
                    f"Failed to authenticate with OpenAI: {e}", original_error=e
                )
        return self._client

    async def _create(self, params: dict[str, Any]) -> ContentGenerationResult:
        try:
            client = self._get_client()
            if self.settings.temperature is not None:
                params["temperature"] = self.settings.temperature

            response: Response = await client.responses.create(**params)

            result = ContentGenerationResult(
                text=response.output_text or "",
                model=params["model"],
                usage=response.usage.model_dump() if response.usage else None,
                finish_reason=response.status,
            )
            logger.info(
                "[OPENAI] Content generation complete",
                finish_reason=result.finish_reason,
            )
            return result

        except OpenAIAuthenticationError:
            raise
        except openai.AuthenticationError as e:
            logger.error("[OPENAI] Authentication failed", error=str(e))
            raise OpenAIAuthenticationError(
                f"Failed to authenticate with OpenAI: {e}",
                status_code=e.status_code,
                original_error=e,
            ) from e
        except Exception as e:
            logger.error("[OPENAI] Content generation failed", error=str(e))
            status_code = e.status_code if isinstance(e, openai.APIStatusError) else None
            raise OpenAIContentGenerationError(
                f"Failed to generate content: {e}",
                status_code=status_code,
                original_error=e,
            ) from e

    async def generate_structured(
        self,
        prompt: str,
        response_schema: type[BaseModel],
        model: str | None = None,
    ) -> ContentGenerationResult:
        """Generate JSON text using a strict json_schema text format.

        Args:
            prompt: Text prompt
            response_schema: Pydantic model describing the expected JSON object
            model: Model name override

        Returns:
            ContentGenerationResult: Raw JSON text
        """
        model_name = model or self.settings.notes_model_name
        logger.info(
            "[OPENAI] Generating structured content",
            model=model_name,
            schema=response_schema.__name__,
        )
        return await self._create(
            {
                "model": model_name,
                "input": prompt,
                "text": {
                    "format": {
                        "type": "json_schema",
                        "name": response_schema.__name__,
                        "schema": strict_json_schema(response_schema),
                        "strict": True,
                    }
                },
            }
        )

    async def generate_text(
        self, prompt: str, model: str | None = None
    ) -> ContentGenerationResult:
        """Generate free text.

        Args:
            prompt: Text prompt
            model: Model name override

        Returns:
            ContentGenerationResult: Generated text
        """
        model_name = model or self.settings.ask_model_name
        logger.info("[OPENAI] Generating content", model=model_name)
        return await self._create({"model": model_name, "input": prompt})
