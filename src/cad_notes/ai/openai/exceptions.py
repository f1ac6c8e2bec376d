"""OpenAI API exceptions."""

from cad_notes.exceptions import ModelInvocationError


class OpenAIError(ModelInvocationError):
    """Base exception for OpenAI API errors."""

    pass


class OpenAIAuthenticationError(OpenAIError):
    """Exception raised for authentication errors."""

    pass


class OpenAIContentGenerationError(OpenAIError):
    """Exception raised for content generation errors."""

    pass
