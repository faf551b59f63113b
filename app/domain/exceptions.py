from __future__ import annotations


class SuggestionError(Exception):
    """Base error for the AI suggestion feature."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SuggestionError):
    """Raised when the suggestion service has no credential configured."""

    def __init__(self, message: str = "AI suggestion service not configured"):
        super().__init__(message)


class SuggestionServiceError(SuggestionError):
    """Raised when the call to the suggestion service itself fails."""

    def __init__(
        self,
        message: str = (
            "Failed to get suggestions from AI. It's possible the API key is invalid "
            "or the service is unavailable."
        ),
    ):
        super().__init__(message)
