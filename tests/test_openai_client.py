"""Tests for the OpenAI model client."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import openai
import pytest

from cad_notes.ai.openai.client import OpenAIClient, strict_json_schema
from cad_notes.ai.openai.config import OpenAISettings
from cad_notes.ai.openai.exceptions import (
    OpenAIAuthenticationError,
    OpenAIContentGenerationError,
)
from cad_notes.exceptions import ModelInvocationError
from cad_notes.notes.schemas import CadNotesSchema

RESPONSES_URL = "https://api.openai.com/v1/responses"


@pytest.fixture
def settings():
    return OpenAISettings(api_key="sk-test")


@pytest.fixture
def mock_async_openai():
    """Patch AsyncOpenAI and expose its responses.create mock."""
    with patch("cad_notes.ai.openai.client.AsyncOpenAI") as client_cls:
        response = Mock(output_text="  answer  ", usage=None, status="completed")
        client_cls.return_value.responses.create = AsyncMock(return_value=response)
        yield client_cls


def _status_error(error_cls, status_code: int):
    response = httpx.Response(
        status_code, request=httpx.Request("POST", RESPONSES_URL)
    )
    return error_cls("request failed", response=response, body=None)


class TestStrictJsonSchema:
    """Test suite for strict_json_schema."""

    def test_requires_every_property(self):
        schema = strict_json_schema(CadNotesSchema)

        assert set(schema["required"]) == {
            "materialDescription",
            "grade",
            "generalNotes",
            "finishNotes",
        }
        assert schema["additionalProperties"] is False


class TestOpenAIClient:
    """Test suite for OpenAIClient."""

    @pytest.mark.asyncio
    async def test_structured_request_uses_json_schema_format(
        self, settings, mock_async_openai
    ):
        client = OpenAIClient(settings)

        result = await client.generate_structured("prompt", CadNotesSchema)

        params = mock_async_openai.return_value.responses.create.call_args.kwargs
        assert params["model"] == "gpt-4o"
        assert params["input"] == "prompt"
        text_format = params["text"]["format"]
        assert text_format["type"] == "json_schema"
        assert text_format["name"] == "CadNotesSchema"
        assert text_format["strict"] is True
        assert text_format["schema"]["additionalProperties"] is False
        assert "temperature" not in params
        assert result.finish_reason == "completed"

    @pytest.mark.asyncio
    async def test_text_request_uses_ask_model(self, mock_async_openai):
        client = OpenAIClient(OpenAISettings(api_key="sk-test", temperature=0.3))

        result = await client.generate_text("question")

        params = mock_async_openai.return_value.responses.create.call_args.kwargs
        assert params == {"model": "gpt-4o-mini", "input": "question", "temperature": 0.3}
        assert result.text == "  answer  "
        assert result.model == "gpt-4o-mini"

    @pytest.mark.asyncio
    async def test_rate_limit_keeps_status_code(self, settings, mock_async_openai):
        error = _status_error(openai.RateLimitError, 429)
        mock_async_openai.return_value.responses.create.side_effect = error
        client = OpenAIClient(settings)

        with pytest.raises(OpenAIContentGenerationError) as exc_info:
            await client.generate_structured("prompt", CadNotesSchema)

        assert isinstance(exc_info.value, ModelInvocationError)
        assert exc_info.value.status_code == 429
        assert exc_info.value.original_error is error

    @pytest.mark.asyncio
    async def test_authentication_failure(self, settings, mock_async_openai):
        mock_async_openai.return_value.responses.create.side_effect = _status_error(
            openai.AuthenticationError, 401
        )
        client = OpenAIClient(settings)

        with pytest.raises(OpenAIAuthenticationError) as exc_info:
            await client.generate_text("question")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_network_failure_has_no_status(self, settings, mock_async_openai):
        mock_async_openai.return_value.responses.create.side_effect = TimeoutError()
        client = OpenAIClient(settings)

        with pytest.raises(OpenAIContentGenerationError) as exc_info:
            await client.generate_text("question")

        assert exc_info.value.status_code is None
