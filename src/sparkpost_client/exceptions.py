"""Custom exception hierarchy for the SparkPost client."""
from __future__ import annotations

from typing import Any


class SparkPostError(RuntimeError):
    """Base error for SparkPost failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ConfigError(SparkPostError):
    """Raised when the client cannot be configured."""


class MissingCredentialError(ConfigError):
    """Raised when no usable API key was supplied."""


class InvalidTransportError(ConfigError):
    """Raised when the supplied transport lacks the required capability."""


class ResourceNotFoundError(SparkPostError):
    """Raised when the API answers with 404."""

    def __init__(self, endpoint: str, *, details: Any | None = None) -> None:
        super().__init__(
            "The specified resource does not exist", status_code=404, details=details
        )
        self.endpoint = endpoint


class BadResponseError(SparkPostError):
    """Raised for any other non-2xx status returned by the API."""

    def __init__(self, endpoint: str, status: int, *, details: Any | None = None) -> None:
        super().__init__(
            f"Received bad response from {_display_name(endpoint)} API: {status}",
            status_code=status,
            details=details,
        )
        self.endpoint = endpoint


class UnreachableError(SparkPostError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(
            f"Unable to contact {_display_name(endpoint)} API: {message}", details=message
        )
        self.endpoint = endpoint


class UnexpectedResponseError(SparkPostError):
    """Raised when the API returns a payload that is not valid JSON."""


def _display_name(endpoint: str) -> str:
    return endpoint[:1].upper() + endpoint[1:]
