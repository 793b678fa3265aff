"""Constants and enums for neo-esi.

Context keys, render mode keys and protocol defaults shared by the cookie,
URL and rendering layers.
"""

from enum import Enum
from typing import Final


class ContextKey(str, Enum):
    """Context keys supplied by the built-in context provider."""

    ROLE = "ROLE"
    USER = "USER"
    # Liveness sentinel; value is a plain timestamp, never hashed
    LIVE = "LIVE"


class RenderModeKey(str, Enum):
    """Built-in render modes."""

    ESI = "esi"
    SSI = "ssi"
    SSI_REMOTE = "ssi_remote"


class CookieDefaults:
    """Cookie protocol defaults."""

    PREFIX: Final[str] = "ESI_"
    HASH_HEX_LENGTH: Final[int] = 32
    HARDENING_SUFFIX_LENGTH: Final[int] = 8


class SeedDefaults:
    """Seed protocol defaults."""

    LENGTH: Final[int] = 32
    ROTATION_INTERVAL: Final[int] = 86400  # 1 day
    REDIS_KEY: Final[str] = "esi:seed"


class FragmentDefaults:
    """Fragment URL and cache defaults."""

    URL_PREFIX: Final[str] = "esi"
    CACHE_PREFIX: Final[str] = "esi:"
    DEFAULT_TTL: Final[int] = 300  # 5 minutes
    CACHE_MARKER: Final[str] = "CACHE="
    ANONYMOUS_ROLE: Final[str] = "anonymous"
