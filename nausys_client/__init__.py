"""Typed client for the NauSYS yacht-charter reservation API."""

from .client import NausysClient
from .errors import (
    AddressResolutionError,
    ApiError,
    ConfigurationError,
    DateFormatError,
    DecodeError,
    NausysError,
    ProviderError,
    SerializationError,
)
from .response import ApiResponse, check_error_envelope, check_response

__all__ = [
    "AddressResolutionError",
    "ApiError",
    "ApiResponse",
    "ConfigurationError",
    "DateFormatError",
    "DecodeError",
    "NausysClient",
    "NausysError",
    "ProviderError",
    "SerializationError",
    "check_error_envelope",
    "check_response",
]
