"""Component registry builder.

ONLY registration - collects component and render mode contributions at
startup and freezes them into a ``ComponentRegistry``.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Callable, Dict, Iterable, Optional

from ...core.entities.component_descriptor import ComponentDescriptor
from ...core.entities.render_mode import RenderMode
from ...core.protocols.component_provider import ComponentProvider
from ..rendering.render_modes import builtin_render_modes
from .component_registry import ComponentRegistry

logger = logging.getLogger(__name__)

AlterHook = Callable[[Dict[str, ComponentDescriptor], Dict[str, RenderMode]], None]


class RegistryBuilder:
    """Mutable collector of registrations; last registration of a key wins."""

    def __init__(self, include_builtin_modes: bool = True):
        self._components: Dict[str, ComponentDescriptor] = {}
        self._render_modes: Dict[str, RenderMode] = {}
        if include_builtin_modes:
            for mode in builtin_render_modes():
                self._render_modes[mode.key] = mode

    def register(
        self,
        key: str,
        provider: ComponentProvider,
        source: Optional[str] = None,
    ) -> ComponentDescriptor:
        """Register a provider under ``key``, replacing any earlier one."""
        descriptor = ComponentDescriptor(
            key=key,
            provider=provider,
            source=source or type(provider).__module__,
        )
        previous = self._components.get(key)
        if previous is not None:
            logger.info(f"Component '{key}' from {previous.source} overridden by {descriptor.source}")
        self._components[key] = descriptor
        return descriptor

    def add_render_mode(self, mode: RenderMode) -> None:
        """Add or replace a render mode."""
        self._render_modes[mode.key] = mode

    def build(self, alter_hooks: Iterable[AlterHook] = ()) -> ComponentRegistry:
        """Freeze the collected registrations.

        Alter hooks receive copies of the merged mappings and may adjust them
        before the registry is created.
        """
        components = dict(self._components)
        render_modes = dict(self._render_modes)
        for hook in alter_hooks:
            hook(components, render_modes)
        return ComponentRegistry(components, render_modes)
