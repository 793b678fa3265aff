"""Context value hasher.

ONLY the cookie value transform - a one-way commitment of a raw context
value against the current seed: hash(seed || hash(raw_value)).

The result is never decoded; the edge only compares values and the server
only regenerates them.

Following maximum separation architecture - one file = one purpose.
"""

import hashlib
import hmac

from ...config.constants import CookieDefaults

DIGEST_SIZE = CookieDefaults.HASH_HEX_LENGTH // 2


def hash_context_value(seed: bytes, raw_value: str) -> str:
    """Get the 32-hex-character cookie value for a raw context value."""
    inner = hashlib.sha256(raw_value.encode("utf-8")).hexdigest().encode("ascii")
    return hashlib.blake2b(seed + inner, digest_size=DIGEST_SIZE).hexdigest()


def values_match(expected: str, presented: str) -> bool:
    """Constant-time comparison of two cookie values."""
    return hmac.compare_digest(expected.encode("utf-8"), presented.encode("utf-8"))
