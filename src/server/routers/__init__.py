"""API routers."""

from server.routers.render import router

__all__ = ["router"]
