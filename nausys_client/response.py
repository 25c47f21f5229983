"""Captured responses and status classification."""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import ApiError, DecodeError, ProviderError
from .schemas import ErrorEnvelope

logger = logging.getLogger("nausys_client")

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse:
    """A response whose body has been captured into memory.

    ``content`` is owned by this object, so the body can be decoded and read
    again any number of times after the connection is released.
    """

    response: httpx.Response
    content: bytes = field(repr=False)

    @classmethod
    def capture(cls, response: httpx.Response) -> ApiResponse:
        return cls(response=response, content=bytes(response.read()))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def text(self) -> str:
        return self.content.decode(self.response.encoding or "utf-8", errors="replace")

    def body(self) -> io.BytesIO:
        """Return a fresh reader over the captured body."""
        return io.BytesIO(self.content)

    def json(self) -> Any:
        return json.loads(self.content)

    def decode(self, result_type: type[T]) -> T:
        """Decode the captured body into ``result_type``."""
        try:
            return TypeAdapter(result_type).validate_json(self.content)
        except ValidationError as exc:
            raise DecodeError(f"could not decode response into {result_type!r}: {exc}") from exc


def check_response(response: ApiResponse) -> None:
    """Raise ApiError if the status code is outside the 2xx range.

    Redirects count as failures too.
    """
    if response.status_code >= httpx.codes.MULTIPLE_CHOICES:
        code = response.status_code
        message = f"{code} {response.response.reason_phrase}".strip()
        raise ApiError(code, message, response.text, response)


def check_error_envelope(response: ApiResponse) -> None:
    """Raise ProviderError if a successful body carries a non-zero errorCode."""
    envelope = response.decode(ErrorEnvelope)
    if envelope.error_code:
        logger.warning(
            "Provider rejected request: %s (code %s)",
            envelope.status,
            envelope.error_code,
        )
        raise ProviderError(envelope.error_code, envelope.status, response)
