"""Cache scope value object.

ONLY cache scope - whether a fragment's cache key varies by user, by role,
or not at all, and how that fact is marked in a fragment path.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum
from typing import Optional

from ...config.constants import FragmentDefaults

MARKER_PREFIX = FragmentDefaults.CACHE_MARKER


class CacheScope(str, Enum):
    """Cache variation dimension of a fragment."""

    GLOBAL = "GLOBAL"
    ROLE = "ROLE"
    USER = "USER"

    @classmethod
    def from_flags(cls, per_user: bool = False, per_role: bool = False) -> "CacheScope":
        """Build a scope from variation flags; per-user wins over per-role."""
        if per_user:
            return cls.USER
        if per_role:
            return cls.ROLE
        return cls.GLOBAL

    @classmethod
    def from_marker(cls, segment: str) -> Optional["CacheScope"]:
        """Parse a ``CACHE=USER``/``CACHE=ROLE`` path segment.

        Returns None when the segment is not a cache marker at all.
        Raises ValueError for a marker naming an unknown scope.
        """
        if not segment.startswith(MARKER_PREFIX):
            return None
        name = segment[len(MARKER_PREFIX):]
        if name not in (cls.USER.value, cls.ROLE.value):
            raise ValueError(f"Unknown cache scope marker: {segment}")
        return cls(name)

    @property
    def is_personalized(self) -> bool:
        return self is not CacheScope.GLOBAL

    @property
    def marker(self) -> Optional[str]:
        """Path marker token, None for globally cacheable fragments."""
        if self is CacheScope.GLOBAL:
            return None
        return f"{MARKER_PREFIX}{self.value}"
