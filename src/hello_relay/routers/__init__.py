"""API routers for hello-relay."""

from .hello import router as hello_router

__all__ = ["hello_router"]
