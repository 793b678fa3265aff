"""Fragment service routers."""

from .fragment_router import fragment_router
from .admin_router import admin_router

__all__ = ["fragment_router", "admin_router"]
