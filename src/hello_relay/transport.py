"""Outbound transport used by the relay handler."""

from typing import Optional, Protocol, runtime_checkable

import httpx
import structlog

from .exceptions import DependencyError

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


@runtime_checkable
class OutboundTransport(Protocol):
    """Performs one outbound request.

    Implementations raise DependencyError when the call cannot be completed;
    the handler also treats any other error from ``execute`` as a failed call.
    The returned response body is left open; the caller owns it and must
    ``aclose()`` it.
    """

    async def execute(self, request: httpx.Request) -> httpx.Response:
        ...


class HttpxTransport:
    """Production transport over a pooled httpx client."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Per-call timeout in seconds
            client: Pre-built client, mainly for tests. Built from ``timeout`` if omitted.
        """
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=False)
        self.logger = logger.bind(component="HttpxTransport")

    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return the response with its body still streaming."""
        self.logger.debug("Sending external request", method=request.method, url=str(request.url))
        try:
            return await self._client.send(request, stream=True)
        except Exception as e:
            raise DependencyError(str(e) or type(e).__name__) from e

    async def aclose(self) -> None:
        """Close the pooled client."""
        await self._client.aclose()
