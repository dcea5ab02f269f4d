"""Custom exceptions for mycore-client."""

from __future__ import annotations

__all__ = [
    "DeserializationError",
    "InvalidArgumentError",
    "MyCoReClientError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "TransportError",
    "UnauthorizedError",
]


class MyCoReClientError(Exception):
    """Base exception for all mycore-client errors."""


class InvalidArgumentError(MyCoReClientError, ValueError):
    """Raised when a translation key or prefix uses the ``*`` suffix wrongly."""


class TransportError(MyCoReClientError):
    """Raised when the backend could not be reached or answered with an error.

    Parameters:
        message: Human-readable description.
        status: HTTP status code, or ``None`` if no response was received.
        status_text: HTTP reason phrase, if any.
    """

    def __init__(
        self, message: str, status: int | None = None, status_text: str = ""
    ) -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text


class UnauthorizedError(TransportError):
    """Raised for HTTP 401 responses."""


class PermissionDeniedError(TransportError):
    """Raised for HTTP 403 responses."""


class ResourceNotFoundError(TransportError):
    """Raised for HTTP 404 responses."""


class DeserializationError(MyCoReClientError):
    """Raised when a stored cache entry cannot be parsed."""
