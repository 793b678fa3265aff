"""Component settings repository protocol."""

from typing import Dict, Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.component_settings import ComponentSettings


@runtime_checkable
class ComponentSettingsRepository(Protocol):
    """Storage of per-instance component settings."""

    async def get(self, instance_id: str) -> Optional[ComponentSettings]:
        ...

    async def save(self, instance_id: str, settings: ComponentSettings) -> None:
        ...

    async def delete(self, instance_id: str) -> bool:
        ...

    async def list_all(self) -> Dict[str, ComponentSettings]:
        ...
