"""Redis seed repository.

ONLY Redis implementation - seed storage shared by every worker process,
with WATCH/MULTI compare-and-swap on a single hash key.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError, WatchError

from ....config.constants import SeedDefaults
from ....core.exceptions import PersistenceFailure
from ....core.value_objects.seed import Seed

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


class RedisSeedRepository:
    """Seed storage in a Redis hash (fields ``value`` and ``last_changed``)."""

    def __init__(self, redis_client: Redis, key: str = SeedDefaults.REDIS_KEY):
        """Initialize Redis seed repository.

        Args:
            redis_client: Async Redis client
            key: Hash key holding the active seed
        """
        self._redis = redis_client
        self._key = key

    @staticmethod
    def _decode(data: Dict[Any, Any]) -> Optional[Seed]:
        if not data:
            return None
        fields = {_text(k): _text(v) for k, v in data.items()}
        return Seed(
            value=fields["value"].encode("ascii"),
            last_changed=float(fields["last_changed"]),
        )

    @staticmethod
    def _encode(seed: Seed) -> Dict[str, str]:
        return {
            "value": seed.value.decode("ascii"),
            "last_changed": repr(seed.last_changed),
        }

    async def load(self) -> Optional[Seed]:
        try:
            return self._decode(await self._redis.hgetall(self._key))
        except RedisError as e:
            logger.error(f"Failed to load seed from Redis: {e}")
            raise PersistenceFailure("Seed could not be loaded", store="redis", key=self._key) from e

    async def replace(self, expected: Optional[Seed], new: Seed) -> Seed:
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                try:
                    await pipe.watch(self._key)
                    current = self._decode(await pipe.hgetall(self._key))
                    if current != expected:
                        await pipe.unwatch()
                        return current

                    pipe.multi()
                    pipe.hset(self._key, mapping=self._encode(new))
                    await pipe.execute()
                    return new
                except WatchError:
                    # Another worker rotated between WATCH and EXEC; adopt its seed
                    logger.debug("Concurrent seed rotation detected, adopting stored seed")
            return await self.load()
        except RedisError as e:
            logger.error(f"Failed to store seed in Redis: {e}")
            raise PersistenceFailure("Seed could not be stored", store="redis", key=self._key) from e
