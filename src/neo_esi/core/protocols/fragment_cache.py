"""Fragment cache protocol."""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class FragmentCache(Protocol):
    """Server-side store of rendered fragment bodies."""

    async def get(self, key: str) -> Optional[str]:
        """Get a cached body, None on miss or expiry."""
        ...

    async def set(self, key: str, body: str, ttl: int) -> None:
        """Store a body for ``ttl`` seconds."""
        ...

    async def delete_prefix(self, prefix: str) -> int:
        """Delete every entry whose key starts with ``prefix``.

        Returns number of entries deleted.
        """
        ...
