"""Seed repository implementations."""

from .memory_seed_repository import MemorySeedRepository
from .redis_seed_repository import RedisSeedRepository

__all__ = ["MemorySeedRepository", "RedisSeedRepository"]
