"""hello-relay - calls an external URL and reports what it got back."""

__version__ = "0.1.0"

from .config import Settings
from .exceptions import ConfigurationError, DependencyError, RelayError, WireMockError
from .models import RelayConfig, RequestPattern, ResponseDefinition, StubMapping
from .services import RelayHandler
from .transport import HttpxTransport, OutboundTransport
from .wiremock import WireMockClient

__all__ = [
    "Settings",
    "RelayConfig",
    "RelayHandler",
    "OutboundTransport",
    "HttpxTransport",
    "WireMockClient",
    "StubMapping",
    "RequestPattern",
    "ResponseDefinition",
    "RelayError",
    "ConfigurationError",
    "DependencyError",
    "WireMockError",
]
