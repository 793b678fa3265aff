"""Fragment cache implementations."""

from .memory_fragment_cache import MemoryFragmentCache
from .redis_fragment_cache import RedisFragmentCache

__all__ = ["MemoryFragmentCache", "RedisFragmentCache"]
