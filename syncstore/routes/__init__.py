"""API routes package."""

from syncstore.routes.device_routes import router as device_router
from syncstore.routes.content_routes import router as content_router

__all__ = ["device_router", "content_router"]
