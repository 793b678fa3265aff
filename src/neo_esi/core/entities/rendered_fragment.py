"""Rendered fragment entity."""

from dataclasses import dataclass
from typing import Optional

from ..value_objects.cache_scope import CacheScope


@dataclass(frozen=True)
class RenderedFragment:
    """Output of a provider's render contract.

    ``ttl`` of None means "use the configured default TTL".
    """

    body: str
    ttl: Optional[int] = None
    cache_scope: CacheScope = CacheScope.GLOBAL

    def __post_init__(self) -> None:
        if self.ttl is not None and self.ttl < 0:
            raise ValueError("Fragment TTL cannot be negative")
