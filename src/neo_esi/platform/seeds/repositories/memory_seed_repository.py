"""Memory seed repository.

ONLY in-memory implementation - seed storage for development, testing and
single-process deployments.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
from typing import Optional

from ....core.value_objects.seed import Seed


class MemorySeedRepository:
    """In-process seed storage guarded by an asyncio lock."""

    def __init__(self, initial: Optional[Seed] = None):
        self._seed = initial
        self._lock = asyncio.Lock()

    async def load(self) -> Optional[Seed]:
        return self._seed

    async def replace(self, expected: Optional[Seed], new: Seed) -> Seed:
        async with self._lock:
            if self._seed != expected:
                return self._seed
            self._seed = new
            return new
