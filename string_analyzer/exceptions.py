from fastapi import status


class StringAnalyzerError(Exception):
    """Base error for the service. Carries the HTTP status it maps to."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(StringAnalyzerError):
    """Value is of the wrong type or empty."""


class AlreadyExists(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT


class NotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND


class Unparseable(StringAnalyzerError):
    """Natural language query produced no filters."""


class FilterValidationError(StringAnalyzerError):
    """Malformed filter query parameter."""
