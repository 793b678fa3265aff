"""Component registry, settings and the built-in block provider."""

from .component_registry import ComponentRegistry
from .registry_builder import RegistryBuilder, AlterHook
from .registry_cache import RegistryCache, Contributor
from .settings_service import ComponentSettingsService
from .block_provider import BlockComponentProvider
from .block_fragment_builder import BlockFragmentBuilder
from .repositories import MemorySettingsRepository, RedisSettingsRepository

__all__ = [
    "ComponentRegistry",
    "RegistryBuilder",
    "AlterHook",
    "RegistryCache",
    "Contributor",
    "ComponentSettingsService",
    "BlockComponentProvider",
    "BlockFragmentBuilder",
    "MemorySettingsRepository",
    "RedisSettingsRepository",
]
