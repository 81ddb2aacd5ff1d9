"""Relay handler: one external call per inbound request."""

import httpx
import structlog
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from ..exceptions import ConfigurationError
from ..models import RelayConfig

logger = structlog.get_logger(__name__)

GREETING_TEMPLATE = "hello {user_agent}. I called to {target_url} and got code {status_code}\n"


def build_outbound_request(target_url: str) -> httpx.Request:
    """Build the GET request sent to the external URL.

    A URL without a scheme still builds; sending it fails in the transport.

    Raises:
        ConfigurationError: If the URL starts with ":", holds a control character
            or cannot be parsed.
    """
    if target_url.startswith(":"):
        raise ConfigurationError(f'parse "{target_url}": missing protocol scheme')
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in target_url):
        raise ConfigurationError(f'parse "{target_url}": invalid control character in URL')

    try:
        url = httpx.URL(target_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f'parse "{target_url}": {e}') from e

    return httpx.Request("GET", url)


def render_greeting(user_agent: str, target_url: str, status_code: int) -> str:
    """Render the success body."""
    return GREETING_TEMPLATE.format(
        user_agent=user_agent, target_url=target_url, status_code=status_code
    )


class RelayResponse(PlainTextResponse):
    """Plain text response that logs, rather than raises, failures to write it."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except Exception as e:
            logger.error("Error writing response", status_code=self.status_code, error=str(e))


class RelayHandler:
    """Calls the configured external URL and describes the outcome."""

    def __init__(self, config: RelayConfig):
        self.config = config
        self.logger = logger.bind(component="RelayHandler")

    async def handle(self, request: Request) -> Response:
        """Handle ``GET /hello``.

        Returns 500 when the external URL is malformed (no call is made), 502 when
        the external call fails and 200 with the greeting otherwise.
        """
        target_url = self.config.target_url

        try:
            outbound = build_outbound_request(target_url)
        except ConfigurationError as e:
            self.logger.error("Invalid external URL", url=target_url, error=str(e))
            return RelayResponse(str(e), status_code=500)

        try:
            upstream = await self.config.transport.execute(outbound)
        except Exception as e:
            message = str(e) or type(e).__name__
            self.logger.error("External call failed", url=target_url, error=message)
            return RelayResponse(message, status_code=502)

        try:
            self.logger.debug(
                "External call completed", url=target_url, status_code=upstream.status_code
            )
            user_agent = request.headers.get("user-agent", "")
            body = render_greeting(user_agent, target_url, upstream.status_code)
            return RelayResponse(body, status_code=200)
        finally:
            await self._release(upstream)

    async def _release(self, upstream: httpx.Response) -> None:
        """Close the external response body; failures are logged only."""
        try:
            await upstream.aclose()
        except Exception as e:
            self.logger.warning("Error closing external response body", error=str(e))
