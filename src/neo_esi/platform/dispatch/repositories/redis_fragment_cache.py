"""Redis fragment cache.

ONLY Redis implementation - rendered fragment bodies shared by every worker
process, expired by Redis itself.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from ....core.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


class RedisFragmentCache:
    """Fragment body store in plain Redis string keys."""

    def __init__(self, redis_client: Redis, scan_batch_size: int = 500):
        """Initialize Redis fragment cache.

        Args:
            redis_client: Async Redis client
            scan_batch_size: SCAN count hint used by prefix deletion
        """
        self._redis = redis_client
        self._scan_batch_size = scan_batch_size

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            # A cache outage degrades to a miss
            logger.warning(f"Fragment cache read failed for '{key}': {e}")
            return None
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def set(self, key: str, body: str, ttl: int) -> None:
        if ttl <= 0:
            return
        try:
            await self._redis.setex(key, ttl, body)
        except RedisError as e:
            logger.warning(f"Fragment cache write failed for '{key}': {e}")

    async def delete_prefix(self, prefix: str) -> int:
        try:
            deleted = 0
            batch = []
            async for key in self._redis.scan_iter(match=f"{prefix}*", count=self._scan_batch_size):
                batch.append(key)
                if len(batch) >= self._scan_batch_size:
                    deleted += await self._redis.delete(*batch)
                    batch = []
            if batch:
                deleted += await self._redis.delete(*batch)
            return deleted
        except RedisError as e:
            logger.error(f"Failed to flush fragment cache prefix '{prefix}': {e}")
            raise PersistenceFailure("Fragment cache could not be flushed", store="redis", key=prefix) from e
