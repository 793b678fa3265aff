"""Memory fragment cache.

ONLY in-memory implementation - rendered fragment bodies for development,
testing, and single-instance deployments.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import time
from typing import Callable, Dict, Optional, Tuple


class MemoryFragmentCache:
    """Process-local fragment body store with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._clock = clock
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            body, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return body

    async def set(self, key: str, body: str, ttl: int) -> None:
        if ttl <= 0:
            return
        async with self._lock:
            self._entries[key] = (body, self._clock() + ttl)

    async def delete_prefix(self, prefix: str) -> int:
        async with self._lock:
            keys = [key for key in self._entries if key.startswith(prefix)]
            for key in keys:
                del self._entries[key]
            return len(keys)

    def __len__(self) -> int:
        return len(self._entries)
