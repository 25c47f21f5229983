"""HTTP client for the NauSYS API."""

from __future__ import annotations

import json
import logging
import math
import platform
import re
from typing import Any, Callable
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel

from .config import REQUEST_CONTENT_TYPE, Settings, env_credentials, get_settings
from .errors import AddressResolutionError, ApiError, ConfigurationError, SerializationError
from .response import ApiResponse, check_response
from .schemas import Credentials
from .services import (
    AvailabilityService,
    CompanyService,
    OccupancyService,
    OffersService,
    ReservationService,
    YachtService,
)

logger = logging.getLogger("nausys_client")

CredentialProvider = Callable[[], Credentials]

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")


def build_user_agent() -> str:
    """Return the ``<os>;<arch>;<runtime>`` fingerprint sent on every call."""
    return ";".join(
        [
            platform.system().lower(),
            platform.machine(),
            f"{platform.python_implementation().lower()}{platform.python_version()}",
        ]
    )


def _check_path(path: str) -> None:
    """Reject a colon in the first segment unless it ends a valid scheme."""
    first_segment = re.split(r"[/?#]", path, maxsplit=1)[0]
    if ":" in first_segment:
        scheme = first_segment.split(":", 1)[0]
        if not _SCHEME.fullmatch(scheme):
            raise AddressResolutionError(f"could not resolve {path!r}: missing protocol scheme")


def _reject_non_finite(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise SerializationError(f"unsupported value: {value!r} has no JSON representation")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _reject_non_finite(item)


def encode_body(body: Any) -> bytes:
    """Serialize a request body as compact JSON without HTML escaping."""
    if isinstance(body, BaseModel):
        # JSON mode turns NaN and infinities into null, so check the python dump first.
        _reject_non_finite(body.model_dump(exclude_none=True))
        try:
            body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        except ValueError as exc:
            raise SerializationError(f"could not serialize {type(body).__name__}: {exc}") from exc
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"could not serialize request body: {exc}") from exc


class NausysClient:
    """Thin wrapper around httpx for NauSYS API calls.

    A single instance is safe to share between threads. Endpoint operations
    are grouped on the ``availability``, ``company``, ``occupancy``,
    ``offers``, ``yacht`` and ``reservation`` attributes.
    """

    def __init__(
        self,
        base_url: str | httpx.URL | None = None,
        *,
        http_client: httpx.Client | None = None,
        credentials: CredentialProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = httpx.URL(str(base_url or settings.base_url))
        self.user_agent = build_user_agent()
        self.credentials = credentials or env_credentials
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=settings.http_timeout_seconds)

        self.availability = AvailabilityService(self)
        self.company = CompanyService(self)
        self.occupancy = OccupancyService(self)
        self.offers = OffersService(self)
        self.yacht = YachtService(self)
        self.reservation = ReservationService(self)

    def build_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build a request for ``path`` resolved against the base URL."""
        # httpx reports an empty path as "/", so inspect the URL text itself.
        if not urlsplit(str(self.base_url)).path.endswith("/"):
            raise ConfigurationError(
                f"malformed base url {str(self.base_url)!r}, it must contain a trailing slash"
            )
        _check_path(path)
        try:
            url = self.base_url.join(path)
        except httpx.InvalidURL as exc:
            raise AddressResolutionError(f"could not resolve {path!r}: {exc}") from exc

        content = encode_body(body) if body is not None else None
        headers = {
            "Content-Type": REQUEST_CONTENT_TYPE,
            "Accept": REQUEST_CONTENT_TYPE,
            "User-Agent": self.user_agent,
        }
        return self._client.build_request(method, url, content=content, headers=headers)

    def send(self, request: httpx.Request) -> ApiResponse:
        """Send a request once and return the captured response.

        Network failures propagate as raised by httpx. A status code of 300
        or above raises ApiError carrying the captured response.
        """
        logger.debug("%s %s", request.method, request.url)
        raw = self._client.send(request)
        try:
            response = ApiResponse.capture(raw)
        finally:
            raw.close()
        logger.debug(
            "%s %s -> %s (%d bytes)", request.method, request.url, response.status_code, len(response.content)
        )

        try:
            check_response(response)
        except ApiError:
            logger.warning("%s %s failed with %s", request.method, request.url, response.status_code)
            raise
        return response

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> NausysClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
