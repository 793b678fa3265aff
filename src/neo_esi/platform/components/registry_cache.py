"""Component registry cache.

ONLY registry lifetime - builds the registry lazily from the startup
contributions, serves the same immutable snapshot until an explicit flush,
and rebuilds it off to the side before publishing it in one assignment.
Concurrent resolvers never see a partially populated registry.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import threading
from typing import Callable, List, Mapping, Optional, Sequence

from ...core.entities.component_descriptor import ComponentDescriptor
from ...core.entities.render_mode import RenderMode
from ...core.protocols.component_provider import ComponentProvider
from .component_registry import ComponentRegistry
from .registry_builder import AlterHook, RegistryBuilder

logger = logging.getLogger(__name__)

Contributor = Callable[[RegistryBuilder], None]


class RegistryCache:
    """Process-wide owner of the current component registry."""

    def __init__(
        self,
        contributors: Optional[Sequence[Contributor]] = None,
        alter_hooks: Optional[Sequence[AlterHook]] = None,
    ):
        self._contributors: List[Contributor] = list(contributors or [])
        self._alter_hooks: List[AlterHook] = list(alter_hooks or [])
        self._registry: Optional[ComponentRegistry] = None
        self._epoch = 0
        self._lock = threading.Lock()

    @property
    def epoch(self) -> int:
        """Number of registries built so far."""
        return self._epoch

    def add_contributor(self, contributor: Contributor) -> None:
        """Add a contribution and drop the cached registry."""
        with self._lock:
            self._contributors.append(contributor)
            self._registry = None

    def add_alter_hook(self, hook: AlterHook) -> None:
        with self._lock:
            self._alter_hooks.append(hook)
            self._registry = None

    def register(self, key: str, provider: ComponentProvider, source: Optional[str] = None) -> None:
        """Register a single provider as its own contribution."""
        self.add_contributor(lambda builder: builder.register(key, provider, source))

    def get(self) -> ComponentRegistry:
        """Get the current registry, building it on first access."""
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                self._registry = self._build()
            return self._registry

    def flush(self) -> None:
        """Drop the cached registry; the next access rebuilds it."""
        with self._lock:
            self._registry = None
        logger.info("Component registry flushed")

    def resolve(self, key: str) -> Optional[ComponentDescriptor]:
        return self.get().resolve(key)

    def list_render_modes(self) -> Mapping[str, RenderMode]:
        return self.get().list_render_modes()

    def _build(self) -> ComponentRegistry:
        builder = RegistryBuilder()
        for contribute in self._contributors:
            contribute(builder)
        registry = builder.build(self._alter_hooks)
        self._epoch += 1
        logger.info(
            f"Built component registry #{self._epoch}: "
            f"{len(registry)} components, {len(registry.list_render_modes())} render modes"
        )
        return registry
