"""Seed store service.

ONLY seed lifecycle - serves the active seed, creating it lazily and
rotating it once its rotation interval has elapsed.

Rotation is the invalidation mechanism of the context cookie protocol:
every hashed cookie issued under the previous seed stops matching, so edge
cache entries keyed on old cookie values are never hit again.

Following maximum separation architecture - one file = one purpose.
"""

import logging
import time
from typing import Callable, Optional, Tuple

from ...config.constants import SeedDefaults
from ...core.protocols.seed_repository import SeedRepository
from ...core.value_objects.seed import Seed
from .generator import generate_seed_value

logger = logging.getLogger(__name__)

# Smallest step that keeps last_changed strictly increasing on a frozen clock
MIN_TIMESTAMP_STEP = 1e-6


class SeedStore:
    """Explicitly owned holder of the rotating seed.

    Concurrent callers that find the same expired seed race through the
    repository's compare-and-swap; one rotation wins and the others adopt
    its result.
    """

    def __init__(
        self,
        repository: SeedRepository,
        rotation_interval: int = SeedDefaults.ROTATION_INTERVAL,
        clock: Callable[[], float] = time.time,
        generator: Callable[[], bytes] = generate_seed_value,
    ):
        """Initialize seed store.

        Args:
            repository: Storage of the active seed
            rotation_interval: Seconds a seed stays active
            clock: Source of the current Unix time
            generator: Source of fresh seed material
        """
        if rotation_interval <= 0:
            raise ValueError("Seed rotation interval must be positive")

        self._repository = repository
        self._rotation_interval = rotation_interval
        self._clock = clock
        self._generator = generator

    @property
    def rotation_interval(self) -> int:
        return self._rotation_interval

    async def current(self) -> Seed:
        """Get the active seed, rotating first if absent or expired."""
        seed = await self._repository.load()
        if seed is None or seed.is_due(self._clock(), self._rotation_interval):
            seed, _ = await self._rotate(seed)
        return seed

    async def get_seed(self) -> bytes:
        """Get the active seed value."""
        return (await self.current()).value

    async def rotate_seed(self) -> bytes:
        """Replace the active seed unconditionally and return the new value."""
        previous = await self._repository.load()
        active, _ = await self._rotate(previous)
        return active.value

    async def rotate_if_due(self) -> bool:
        """Scheduled maintenance entry point.

        Returns True if this call rotated the seed.
        """
        previous = await self._repository.load()
        if previous is not None and not previous.is_due(self._clock(), self._rotation_interval):
            return False
        _, rotated = await self._rotate(previous)
        return rotated

    async def _rotate(self, previous: Optional[Seed]) -> Tuple[Seed, bool]:
        now = self._clock()
        last_changed = now
        if previous is not None:
            last_changed = max(now, previous.last_changed + MIN_TIMESTAMP_STEP)

        value = self._generator()
        while previous is not None and value == previous.value:
            value = self._generator()

        candidate = Seed(value=value, last_changed=last_changed)
        active = await self._repository.replace(previous, candidate)
        rotated = active is candidate

        if rotated:
            if previous is None:
                logger.info("Created initial context cookie seed")
            else:
                logger.info(
                    f"Rotated context cookie seed after {previous.age(now):.0f}s "
                    f"(interval {self._rotation_interval}s)"
                )
        else:
            logger.debug("Seed was rotated concurrently, using stored seed")

        return active, rotated
