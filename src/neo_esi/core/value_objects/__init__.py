"""Core value objects."""

from .seed import Seed
from .cache_scope import CacheScope

__all__ = ["Seed", "CacheScope"]
