"""Context cookie protocol."""

from .cookie_manager import CookieManager
from .value_hasher import hash_context_value, values_match

__all__ = ["CookieManager", "hash_context_value", "values_match"]
