"""Component settings service.

ONLY settings persistence - reads instance settings with defaults and
writes them all-or-nothing: a failed write restores the previous value
before the failure is reported.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Dict

from ...core.entities.component_settings import ComponentSettings
from ...core.exceptions import PersistenceFailure
from ...core.protocols.settings_repository import ComponentSettingsRepository

logger = logging.getLogger(__name__)


class ComponentSettingsService:
    """Per-instance fragment settings with rollback on failed writes."""

    def __init__(self, repository: ComponentSettingsRepository):
        self._repository = repository

    async def get(self, instance_id: str) -> ComponentSettings:
        """Get instance settings; instances without settings are not fragments."""
        settings = await self._repository.get(instance_id)
        return settings if settings is not None else ComponentSettings()

    async def list_all(self) -> Dict[str, ComponentSettings]:
        return await self._repository.list_all()

    async def save(self, instance_id: str, settings: ComponentSettings) -> None:
        """Store instance settings.

        Raises:
            PersistenceFailure: the write failed; the previous value is restored
        """
        previous = await self._repository.get(instance_id)
        try:
            await self._repository.save(instance_id, settings)
        except Exception as e:
            logger.error(f"Saving fragment settings for '{instance_id}' failed, rolling back: {e}")
            await self._rollback(instance_id, previous)
            raise PersistenceFailure(
                f"Fragment settings for '{instance_id}' were not saved",
                store=type(self._repository).__name__,
                key=instance_id,
            ) from e

        logger.info(
            f"Saved fragment settings for '{instance_id}': enabled={settings.enabled}, "
            f"ttl={settings.ttl}, scope={settings.cache_scope.value}"
        )

    async def delete(self, instance_id: str) -> bool:
        return await self._repository.delete(instance_id)

    async def _rollback(self, instance_id: str, previous) -> None:
        try:
            if previous is None:
                await self._repository.delete(instance_id)
            else:
                await self._repository.save(instance_id, previous)
        except Exception as e:
            logger.error(f"Rollback of fragment settings for '{instance_id}' failed: {e}")
