"""Component registry.

ONLY lookup - an immutable snapshot of every registered component and
render mode, produced by ``RegistryBuilder`` and published by
``RegistryCache``.

Following maximum separation architecture - one file = one purpose.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ...core.entities.component_descriptor import ComponentDescriptor
from ...core.entities.render_mode import RenderMode
from ...core.exceptions import UnknownComponent


class ComponentRegistry:
    """Read-only mapping of component keys and render mode keys."""

    def __init__(
        self,
        components: Mapping[str, ComponentDescriptor],
        render_modes: Mapping[str, RenderMode],
    ):
        self._components = MappingProxyType(dict(components))
        self._render_modes = MappingProxyType(dict(render_modes))

    def resolve(self, key: str) -> Optional[ComponentDescriptor]:
        """Get the descriptor registered under ``key``, None if unknown."""
        return self._components.get(key)

    def require(self, key: str) -> ComponentDescriptor:
        """Get the descriptor registered under ``key`` or raise UnknownComponent."""
        descriptor = self._components.get(key)
        if descriptor is None:
            raise UnknownComponent(key)
        return descriptor

    def list_components(self) -> Mapping[str, ComponentDescriptor]:
        return self._components

    def list_render_modes(self) -> Mapping[str, RenderMode]:
        return self._render_modes

    def get_render_mode(self, key: Optional[str]) -> Optional[RenderMode]:
        if key is None:
            return None
        return self._render_modes.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._components

    def __len__(self) -> int:
        return len(self._components)

    def summary(self) -> Dict[str, object]:
        return {
            "components": sorted(self._components),
            "render_modes": sorted(self._render_modes),
        }
