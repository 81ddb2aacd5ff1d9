"""FastAPI application factory for hello-relay."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from . import __version__
from .config import Settings, settings as default_settings
from .log import configure_logging
from .models import RelayConfig
from .routers import hello_router
from .services import RelayHandler
from .transport import HttpxTransport, OutboundTransport

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[OutboundTransport] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use, the global settings if omitted
        transport: Outbound transport. When omitted an HttpxTransport is created
            at startup and closed at shutdown; an injected one is left open.
    """
    settings = settings or default_settings

    configure_logging(settings.log_level, settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_transport = None
        if transport is None:
            owned_transport = HttpxTransport(timeout=settings.request_timeout)

        config = RelayConfig(
            target_url=settings.external_url,
            transport=transport or owned_transport,
        )
        app.state.relay_handler = RelayHandler(config)
        logger.info("Starting hello-relay", external_url=settings.external_url)

        try:
            yield
        finally:
            if owned_transport is not None:
                await owned_transport.aclose()
            logger.info("hello-relay stopped")

    app = FastAPI(
        title="hello-relay",
        description="Calls an external URL and reports the status code it got",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.include_router(hello_router)

    return app


# Create the app instance
app = create_app()
