"""HTTP surface of the fragment service."""

from .dependencies import get_principal, get_services, get_dispatcher, get_seed_store, require_admin
from .exception_handlers import register_exception_handlers
from .middleware import ContextCookieMiddleware, apply_cookies
from .routers import fragment_router, admin_router

__all__ = [
    "get_principal",
    "get_services",
    "get_dispatcher",
    "get_seed_store",
    "require_admin",
    "register_exception_handlers",
    "ContextCookieMiddleware",
    "apply_cookies",
    "fragment_router",
    "admin_router",
]
