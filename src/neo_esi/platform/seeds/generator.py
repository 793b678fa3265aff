"""Seed material generator.

ONLY secret generation - 32 unpredictable printable characters drawn from
the operating system's cryptographically secure source.

Following maximum separation architecture - one file = one purpose.
"""

import secrets
import string

from ...core.value_objects.seed import Seed

SEED_ALPHABET = string.ascii_letters + string.digits + string.punctuation


def generate_seed_value(length: int = Seed.LENGTH) -> bytes:
    """Generate fresh seed material."""
    return "".join(secrets.choice(SEED_ALPHABET) for _ in range(length)).encode("ascii")
