"""
Error types raised by the services and mapped to HTTP responses.
"""
from fastapi import status


class AppError(Exception):
    """Base error carrying the message and status returned to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class Unauthenticated(AppError):
    """No bearer token was supplied."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Missing bearer token"


class Forbidden(AppError):
    """Token is malformed, wrongly signed or expired."""
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid or expired token"


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class UpstreamError(AppError):
    """Transport or provider failure talking to the completion API."""
    message = "Upstream completion failed"


class InvalidUpstreamFormat(AppError):
    """Upstream text could not be parsed as JSON."""
    message = "Invalid JSON response from OpenAI"


class ClientDisconnected(AppError):
    """Caller went away before the upstream call finished."""
    status_code = 499
    message = "Client closed request"


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""
