"""Custom exceptions for the Gemini integration package."""

from cad_notes.exceptions import ModelInvocationError


class GeminiError(ModelInvocationError):
    """Base exception for all Gemini-related errors."""

    pass


class GeminiAuthenticationError(GeminiError):
    """Raised when authentication with Gemini API fails."""

    pass


class GeminiRateLimitError(GeminiError):
    """Raised when Gemini API rate limit is exceeded."""

    pass


class GeminiServerError(GeminiError):
    """Raised when Gemini API returns a server error."""

    pass


class GeminiBadRequestError(GeminiError):
    """Raised when a bad request is made to Gemini API."""

    pass


def gemini_error_for_status(status_code: int | None) -> type[GeminiError]:
    """Pick the exception class matching an HTTP status from the Gemini API."""
    if status_code in (401, 403):
        return GeminiAuthenticationError
    if status_code == 429:
        return GeminiRateLimitError
    if status_code is not None and status_code >= 500:
        return GeminiServerError
    if status_code is not None and status_code >= 400:
        return GeminiBadRequestError
    return GeminiError
