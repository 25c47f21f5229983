"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from nausys_client import NausysClient

TEST_BASE_URL = "http://nausys.test/CBMS-external/rest/"


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, payload: Any = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.payload = {} if payload is None else payload
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def credentials_env(monkeypatch):
    """Provide provider credentials through the environment."""
    monkeypatch.setenv("NAUSYS_API_USERNAME", "agent")
    monkeypatch.setenv("NAUSYS_API_PASSWORD", "secret")


@pytest.fixture
def make_client() -> Callable[..., NausysClient]:
    """Build NausysClient instances backed by an in-memory transport."""
    http_clients: list[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response], base_url: str = TEST_BASE_URL) -> NausysClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return NausysClient(base_url, http_client=http_client)

    yield factory

    for http_client in http_clients:
        http_client.close()


@pytest.fixture
def recorder() -> type[RecordingHandler]:
    """Factory for recording transport handlers."""
    return RecordingHandler
