"""Component settings repository implementations."""

from .memory_settings_repository import MemorySettingsRepository
from .redis_settings_repository import RedisSettingsRepository

__all__ = ["MemorySettingsRepository", "RedisSettingsRepository"]
