"""Client for the WireMock admin API, used to set up stubs for tests."""

import time
from typing import Optional

import httpx
import structlog

from .exceptions import WireMockError
from .models import StubMapping

logger = structlog.get_logger(__name__)


class WireMockClient:
    """Configures stubs and checks health on a WireMock server."""

    def __init__(self, admin_url: str, client: Optional[httpx.Client] = None):
        """Initialize the client.

        Args:
            admin_url: Base URL of the WireMock server, e.g. ``http://localhost:8081``
            client: Pre-built httpx client, mainly for tests
        """
        self.admin_url = admin_url.rstrip("/")
        self._client = client or httpx.Client(timeout=10.0)
        self.logger = logger.bind(component="WireMockClient", admin_url=self.admin_url)

    def __enter__(self) -> "WireMockClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def health_check(self) -> None:
        """Raise WireMockError unless the server reports healthy."""
        response = self._request("GET", "/__admin/health", "health check")
        if response.status_code != 200:
            raise WireMockError(
                f"wiremock unhealthy, status {response.status_code}: {response.text}"
            )

    def reset(self) -> None:
        """Remove all stub mappings."""
        response = self._request("POST", "/__admin/reset", "reset")
        self._expect(response, 200)
        self.logger.info("Reset WireMock stubs")

    def create_stub(self, stub: StubMapping) -> None:
        """Register a stub mapping."""
        response = self._request(
            "POST", "/__admin/mappings", "create stub", json=stub.to_payload()
        )
        self._expect(response, 201)
        self.logger.info(
            "Created WireMock stub",
            method=stub.request.method,
            url=stub.request.url or stub.request.url_path,
            status=stub.response.status,
        )

    def wait_until_healthy(self, attempts: int = 10, interval: float = 0.5) -> None:
        """Poll the health endpoint until it succeeds, raising the last error."""
        last_error: Optional[WireMockError] = None
        for attempt in range(attempts):
            try:
                self.health_check()
                return
            except WireMockError as e:
                last_error = e
                self.logger.debug("WireMock not ready", attempt=attempt + 1, error=str(e))
                if attempt + 1 < attempts:
                    time.sleep(interval)

        raise WireMockError(f"wiremock not available at {self.admin_url}: {last_error}")

    def _request(self, method: str, path: str, action: str, **kwargs) -> httpx.Response:
        try:
            return self._client.request(method, f"{self.admin_url}{path}", **kwargs)
        except httpx.HTTPError as e:
            self.logger.error("WireMock request failed", action=action, error=str(e))
            raise WireMockError(f"failed to {action}: {e}") from e

    @staticmethod
    def _expect(response: httpx.Response, status_code: int) -> None:
        if response.status_code != status_code:
            raise WireMockError(
                f"unexpected status {response.status_code}: {response.text}"
            )
