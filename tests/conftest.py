"""Pytest configuration and fixtures."""

from typing import Optional

import httpx
import pytest
from starlette.requests import Request

from hello_relay.config import Settings
from hello_relay.models import RelayConfig
from hello_relay.services import RelayHandler

SETTINGS_ENV_VARS = (
    "EXTERNAL_URL",
    "API_HOST",
    "API_PORT",
    "REQUEST_TIMEOUT",
    "SHUTDOWN_TIMEOUT",
    "LOG_LEVEL",
    "DEBUG",
)

TARGET_URL = "http://upstream.test/status/204"


class TrackedStream(httpx.AsyncByteStream):
    """Response body that reports when it is closed."""

    def __init__(self, transport: "ScriptedTransport"):
        self._transport = transport

    async def __aiter__(self):
        yield b""

    async def aclose(self) -> None:
        self._transport.released += 1
        if self._transport.close_error is not None:
            raise self._transport.close_error


class ScriptedTransport:
    """Outbound transport stand-in returning a scripted outcome."""

    def __init__(
        self,
        status_code: int = 200,
        error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.error = error
        self.close_error = close_error
        self.requests: list[httpx.Request] = []
        self.acquired = 0
        self.released = 0

    async def execute(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        self.acquired += 1
        return httpx.Response(self.status_code, stream=TrackedStream(self), request=request)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scripted_transport():
    """Transport stand-in answering 204."""
    return ScriptedTransport(status_code=204)


@pytest.fixture
def make_handler():
    """Build a RelayHandler for a target URL and transport."""

    def _make(transport, target_url: str = TARGET_URL) -> RelayHandler:
        return RelayHandler(RelayConfig(target_url=target_url, transport=transport))

    return _make


@pytest.fixture
def make_request():
    """Build an inbound ``GET /hello`` request, optionally with a User-Agent."""

    def _make(user_agent: Optional[str] = None) -> Request:
        headers = []
        if user_agent is not None:
            headers.append((b"user-agent", user_agent.encode("latin-1")))
        return Request(
            {
                "type": "http",
                "method": "GET",
                "path": "/hello",
                "query_string": b"",
                "headers": headers,
            }
        )

    return _make


@pytest.fixture
def relay_settings():
    """Settings pointing at the stand-in upstream."""
    return Settings(external_url=TARGET_URL)


@pytest.fixture
def target_url():
    """External URL used by the stand-in fixtures."""
    return TARGET_URL


@pytest.fixture
def make_transport():
    """Factory for scripted transports."""
    return ScriptedTransport
