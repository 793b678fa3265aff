"""Seed store: the rotating secret behind context cookie values."""

from .seed_store import SeedStore
from .generator import generate_seed_value
from .repositories import MemorySeedRepository, RedisSeedRepository

__all__ = [
    "SeedStore",
    "generate_seed_value",
    "MemorySeedRepository",
    "RedisSeedRepository",
]
