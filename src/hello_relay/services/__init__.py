"""Services module for hello-relay."""

from .relay import (
    RelayHandler,
    RelayResponse,
    build_outbound_request,
    render_greeting,
)

__all__ = [
    "RelayHandler",
    "RelayResponse",
    "build_outbound_request",
    "render_greeting",
]
