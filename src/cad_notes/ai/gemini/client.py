"""Google Gemini API client implementation."""

from typing import Any

from braintrust.wrappers.google_genai import setup_genai
from google import genai
from google.genai import errors, types
from pydantic import BaseModel

from cad_notes.ai.base import ContentGenerationResult, ModelClient
from cad_notes.ai.gemini.config import GeminiSettings
from cad_notes.ai.gemini.exceptions import GeminiError, gemini_error_for_status
from cad_notes.utils.logger import logger


class GeminiClient(ModelClient):
    """Async client for Google Gemini API.

    Provides structured (JSON schema) and free-text generation. Handles
    authentication and converts SDK failures to GeminiError.
    """

    def __init__(self, settings: GeminiSettings) -> None:
        """Initialize Gemini client.

        Args:
            settings: Gemini settings instance with API configuration
        """
        self.settings = settings
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Get or create the Gemini client.

        Automatically sets up Braintrust tracing if a project is configured.
        """
        if self._client is None:
            try:
                if self.settings.braintrust_project_name:
                    logger.info(
                        f"Setting up Gemini with Braintrust tracing enabled (project: {self.settings.braintrust_project_name})"
                    )
                    setup_genai(project_name=self.settings.braintrust_project_name)

                self._client = genai.Client(
                    api_key=self.settings.api_key,
                    http_options=types.HttpOptions(timeout=self.settings.timeout * 1000),
                )
                logger.info("Gemini client initialized")
            except Exception as e:
                logger.error("Failed to initialize Gemini client", error=str(e))
                raise GeminiError(f"Failed to authenticate: {e}", original_error=e)
        return self._client

    def _handle_api_error(self, error: Exception, operation: str) -> GeminiError:
        """Convert an SDK error into the matching GeminiError subclass."""
        if isinstance(error, GeminiError):
            return error
        status_code = error.code if isinstance(error, errors.APIError) else None
        error_cls = gemini_error_for_status(status_code)
        return error_cls(
            f"{operation} failed: {error}",
            status_code=status_code,
            original_error=error,
        )

    async def _generate(
        self,
        prompt: str,
        model_name: str,
        config: types.GenerateContentConfig | None,
        operation: str,
    ) -> ContentGenerationResult:
        try:
            client = self._get_client()
            logger.info("Generating content with model", model_name=model_name)

            response = await client.aio.models.generate_content(
                model=model_name,
                contents=prompt,
                config=config,
            )

            return ContentGenerationResult(
                text=response.text or "",
                model=model_name,
                usage=response.usage_metadata.model_dump(exclude_none=True)
                if response.usage_metadata
                else None,
                finish_reason=_finish_reason(response),
            )

        except Exception as e:
            logger.error(f"{operation} failed", model_name=model_name, error=str(e))
            raise self._handle_api_error(e, operation) from e

    def _base_config(self) -> dict[str, Any]:
        generation_config: dict[str, Any] = {}
        if self.settings.temperature is not None:
            generation_config["temperature"] = self.settings.temperature
        return generation_config

    async def generate_structured(
        self,
        prompt: str,
        response_schema: type[BaseModel],
        model: str | None = None,
    ) -> ContentGenerationResult:
        """Generate JSON content constrained by a Pydantic model's schema.

        Args:
            prompt: Text prompt for content generation
            response_schema: Pydantic model describing the expected JSON object
            model: Model name override for this request

        Returns:
            ContentGenerationResult: Raw JSON text returned by Gemini

        Raises:
            GeminiError: If content generation fails
        """
        generation_config = self._base_config()
        generation_config["response_mime_type"] = "application/json"
        generation_config["response_json_schema"] = response_schema.model_json_schema()
        logger.debug("Calling model API with response schema", schema=response_schema.__name__)

        return await self._generate(
            prompt,
            model or self.settings.notes_model_name,
            types.GenerateContentConfig(**generation_config),
            "Structured content generation",
        )

    async def generate_text(
        self, prompt: str, model: str | None = None
    ) -> ContentGenerationResult:
        """Generate free-text content.

        Args:
            prompt: Text prompt for content generation
            model: Model name override for this request

        Returns:
            ContentGenerationResult: Generated text

        Raises:
            GeminiError: If content generation fails
        """
        generation_config = self._base_config()
        return await self._generate(
            prompt,
            model or self.settings.ask_model_name,
            types.GenerateContentConfig(**generation_config)
            if generation_config
            else None,
            "Content generation",
        )


def _finish_reason(response: types.GenerateContentResponse) -> str | None:
    if not response.candidates:
        return None
    reason = response.candidates[0].finish_reason
    return str(reason.value) if reason is not None else None
