"""Context providers: named dimensions along which fragment caching varies."""

from .default_provider import DefaultContextProvider
from .context_registry import ContextRegistry

__all__ = ["DefaultContextProvider", "ContextRegistry"]
