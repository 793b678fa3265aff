"""Redis component settings repository.

ONLY Redis implementation - component settings stored as JSON strings, one
key per component instance.

Following maximum separation architecture - one file = one purpose.
"""

import json
import logging
from typing import Any, Dict, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ....core.entities.component_settings import ComponentSettings
from ....core.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


class RedisSettingsRepository:
    """Component settings storage in Redis."""

    def __init__(self, redis_client: Redis, key_prefix: str = "esi:settings:"):
        self._redis = redis_client
        self._key_prefix = key_prefix

    def _build_key(self, instance_id: str) -> str:
        return f"{self._key_prefix}{instance_id}"

    def _failure(self, action: str, key: str, error: Exception) -> PersistenceFailure:
        logger.error(f"Failed to {action} component settings in Redis: {error}")
        return PersistenceFailure(f"Component settings {action} failed", store="redis", key=key)

    async def get(self, instance_id: str) -> Optional[ComponentSettings]:
        key = self._build_key(instance_id)
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            raise self._failure("load", key, e) from e
        if raw is None:
            return None
        return ComponentSettings.from_dict(json.loads(_text(raw)))

    async def save(self, instance_id: str, settings: ComponentSettings) -> None:
        key = self._build_key(instance_id)
        try:
            await self._redis.set(key, json.dumps(settings.to_dict()))
        except RedisError as e:
            raise self._failure("save", key, e) from e

    async def delete(self, instance_id: str) -> bool:
        key = self._build_key(instance_id)
        try:
            return bool(await self._redis.delete(key))
        except RedisError as e:
            raise self._failure("delete", key, e) from e

    async def list_all(self) -> Dict[str, ComponentSettings]:
        result: Dict[str, ComponentSettings] = {}
        try:
            async for key in self._redis.scan_iter(match=f"{self._key_prefix}*"):
                raw = await self._redis.get(key)
                if raw is not None:
                    instance_id = _text(key)[len(self._key_prefix):]
                    result[instance_id] = ComponentSettings.from_dict(json.loads(_text(raw)))
        except RedisError as e:
            raise self._failure("list", f"{self._key_prefix}*", e) from e
        return result
