"""Core protocols."""

from .seed_repository import SeedRepository
from .context_provider import ContextProvider
from .component_provider import ComponentProvider
from .fragment_cache import FragmentCache
from .settings_repository import ComponentSettingsRepository
from .block_renderer import BlockRenderer

__all__ = [
    "SeedRepository",
    "ContextProvider",
    "ComponentProvider",
    "FragmentCache",
    "ComponentSettingsRepository",
    "BlockRenderer",
]
