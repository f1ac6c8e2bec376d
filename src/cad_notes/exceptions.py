"""Exceptions shared across the notes generator."""


class CadNotesError(Exception):
    """Base exception for all notes generator errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingConfigurationError(CadNotesError):
    """Raised when required configuration (an API key) is absent at startup."""

    pass


class MissingInputError(CadNotesError):
    """Raised when a required user input is blank."""

    pass


class ModelInvocationError(CadNotesError):
    """Raised when the model service cannot be reached or rejects the call."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize the invocation error.

        Args:
            message: Error message
            status_code: HTTP status reported by the model service, if any
            original_error: Exception raised by the SDK
        """
        super().__init__(message)
        self.status_code = status_code
        self.original_error = original_error


class MalformedResponseError(CadNotesError):
    """Raised when structured output is not valid JSON or misses required fields."""

    def __init__(self, message: str, response_text: str | None = None) -> None:
        super().__init__(message)
        self.response_text = response_text
