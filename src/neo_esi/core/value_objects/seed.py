"""Seed value object.

ONLY seed representation - the rotating secret and the moment it was
last changed. Exactly one seed is active at a time; rotation replaces both
fields together by replacing the whole object.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Seed:
    """Rotating secret used to derive context cookie values."""

    value: bytes
    last_changed: float

    LENGTH: ClassVar[int] = 32

    def __post_init__(self) -> None:
        """Validate seed length and timestamp."""
        if not isinstance(self.value, bytes):
            raise TypeError("Seed value must be bytes")

        if len(self.value) != self.LENGTH:
            raise ValueError(f"Seed must be exactly {self.LENGTH} bytes")

        if self.last_changed < 0:
            raise ValueError("Seed timestamp cannot be negative")

    def is_due(self, now: float, rotation_interval: int) -> bool:
        """Check if the seed has reached its rotation interval."""
        return now - self.last_changed >= rotation_interval

    def age(self, now: float) -> float:
        """Seconds since the seed was last changed."""
        return max(0.0, now - self.last_changed)

    def __repr__(self) -> str:
        """Debug representation (secret never shown)."""
        return f"Seed(value='***', last_changed={self.last_changed})"

    __str__ = __repr__
