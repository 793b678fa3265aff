"""Fragment dispatch, fragment caching and cache headers."""

from .cache_control import cache_headers, SCOPE_HEADER
from .fragment_dispatcher import FragmentDispatcher, EdgePurger, narrowest_scope
from .repositories import MemoryFragmentCache, RedisFragmentCache

__all__ = [
    "cache_headers",
    "SCOPE_HEADER",
    "FragmentDispatcher",
    "EdgePurger",
    "narrowest_scope",
    "MemoryFragmentCache",
    "RedisFragmentCache",
]
