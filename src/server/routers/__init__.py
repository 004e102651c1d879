"""API routers."""

from server.routers.markup import router as markup_router

__all__ = ["markup_router"]
