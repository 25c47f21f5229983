"""Exceptions raised by the NauSYS client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import ApiResponse


class NausysError(Exception):
    """Base exception for the NauSYS client."""


class ConfigurationError(NausysError):
    """Raised when the client base URL is misconfigured."""


class AddressResolutionError(NausysError):
    """Raised when a request path cannot be resolved against the base URL."""


class SerializationError(NausysError):
    """Raised when a request body has no JSON representation."""


class DecodeError(NausysError):
    """Raised when a response body does not decode into the expected type."""


class DateFormatError(NausysError, ValueError):
    """Raised when wire date text does not match the expected format."""


class ApiError(NausysError):
    """Reports a response whose status code is outside the 2xx range."""

    def __init__(self, code: int, message: str, content: str, response: ApiResponse | None = None) -> None:
        super().__init__(f"{message}:\n{content}")
        self.code = code
        self.message = message
        self.content = content
        self.response = response


class ProviderError(NausysError):
    """Reports a non-zero errorCode inside a successful response body."""

    def __init__(self, error_code: int, status: str | None, response: ApiResponse | None = None) -> None:
        super().__init__(f"invalid response from provider: {status} (Code: {error_code})")
        self.error_code = error_code
        self.status = status
        self.response = response
