"""Relay endpoint."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ..services import RelayHandler

router = APIRouter(tags=["relay"])


def get_relay_handler(request: Request) -> RelayHandler:
    """Return the handler built by the application lifespan."""
    return request.app.state.relay_handler


@router.get("/hello", response_class=Response)
async def hello(request: Request, handler: RelayHandler = Depends(get_relay_handler)):
    """Call the external URL and report its status code."""
    return await handler.handle(request)
