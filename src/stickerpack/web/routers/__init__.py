"""API routers for the REST API."""

from stickerpack.web.routers.validate import router as validate_router

__all__ = ["validate_router"]
