"""Memory component settings repository.

ONLY in-memory implementation - component settings storage for
development, testing and single-process deployments.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
from typing import Dict, Optional

from ....core.entities.component_settings import ComponentSettings


class MemorySettingsRepository:
    """In-process component settings storage."""

    def __init__(self, initial: Optional[Dict[str, ComponentSettings]] = None):
        self._settings: Dict[str, ComponentSettings] = dict(initial or {})
        self._lock = asyncio.Lock()

    async def get(self, instance_id: str) -> Optional[ComponentSettings]:
        return self._settings.get(instance_id)

    async def save(self, instance_id: str, settings: ComponentSettings) -> None:
        async with self._lock:
            self._settings[instance_id] = settings

    async def delete(self, instance_id: str) -> bool:
        async with self._lock:
            return self._settings.pop(instance_id, None) is not None

    async def list_all(self) -> Dict[str, ComponentSettings]:
        return dict(self._settings)
