"""Seed repository protocol.

ONLY seed storage contract - load the active seed and replace it with
compare-and-swap semantics.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.seed import Seed


@runtime_checkable
class SeedRepository(Protocol):
    """Persistent home of the single active seed."""

    async def load(self) -> Optional[Seed]:
        """Get the active seed, None if no seed was ever stored."""
        ...

    async def replace(self, expected: Optional[Seed], new: Seed) -> Seed:
        """Store ``new`` if the active seed still equals ``expected``.

        Returns the seed that is active afterwards: ``new`` on success, or
        the seed another writer stored first.
        """
        ...
