"""Fragment service middleware."""

from .context_cookie_middleware import ContextCookieMiddleware, apply_cookies

__all__ = ["ContextCookieMiddleware", "apply_cookies"]
