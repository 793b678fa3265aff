"""Context cookie manager.

ONLY context cookie lifecycle - turns a principal's contexts into the set of
named, seed-hashed cookies an edge cache varies on, and computes the
instructions that clear them again.

Issuing and revoking are pure computations over (principal, contexts, seed,
settings); writing the descriptors onto a response is the caller's job.
Callers re-issue after authentication success, after logout (revoke) and
when an authenticated request arrives without the liveness cookie
(``needs_boot``).

Following maximum separation architecture - one file = one purpose.
"""

import hashlib
import logging
import time
from datetime import datetime, timezone
from typing import Callable, List, Mapping, Optional

from ...config.constants import ContextKey, CookieDefaults
from ...config.settings import EsiSettings
from ...core.entities.cookie_descriptor import CookieDescriptor
from ...core.entities.principal import Principal
from ..contexts.context_registry import ContextRegistry
from ..seeds.seed_store import SeedStore
from .value_hasher import hash_context_value, values_match

logger = logging.getLogger(__name__)


class CookieManager:
    """Issues and revokes context cookies."""

    def __init__(
        self,
        contexts: ContextRegistry,
        seed_store: SeedStore,
        settings: EsiSettings,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize cookie manager.

        Args:
            contexts: Registry of context providers
            seed_store: Source of the seed values are hashed against
            settings: Cookie prefix, hardening flag and session-cookie baseline
            clock: Source of the current Unix time
        """
        self._contexts = contexts
        self._seed_store = seed_store
        self._settings = settings
        self._clock = clock

    # Names

    def hardening_suffix(self, principal: Principal) -> Optional[str]:
        """Session-scoped cookie name suffix, None when hardening is off."""
        if not self._settings.harden_cookie_names or not principal.session_id:
            return None
        digest = hashlib.sha256(principal.session_id.encode("utf-8")).hexdigest()
        return digest[:CookieDefaults.HARDENING_SUFFIX_LENGTH]

    def cookie_name(self, context_key: str, principal: Principal) -> str:
        """Wire name of the cookie carrying ``context_key``."""
        name = f"{self._settings.cookie_prefix}{context_key}"
        suffix = self.hardening_suffix(principal)
        return f"{name}_{suffix}" if suffix else name

    def cookie_names(self, principal: Principal) -> List[str]:
        """Names of every cookie ``issue_cookies`` would emit, sentinel last."""
        keys = list(self._contexts.gather(principal)) + [ContextKey.LIVE.value]
        return [self.cookie_name(key, principal) for key in keys]

    # Issue / revoke

    def _descriptor(self, name: str, value: str, now: float) -> CookieDescriptor:
        expires = None
        if self._settings.cookie_lifetime > 0:
            expires = datetime.fromtimestamp(now + self._settings.cookie_lifetime, tz=timezone.utc)

        return CookieDescriptor(
            name=name,
            value=value,
            expires=expires,
            path=self._settings.cookie_path,
            domain=self._settings.cookie_domain,
            secure=self._settings.cookie_secure,
            http_only=self._settings.cookie_http_only,
        )

    async def issue_cookies(self, principal: Principal) -> List[CookieDescriptor]:
        """Compute the full context cookie set for a principal.

        Every context value is hashed against the current seed; the liveness
        sentinel carries the current Unix time in plain text.
        """
        seed = await self._seed_store.get_seed()
        now = self._clock()

        cookies = [
            self._descriptor(
                self.cookie_name(key, principal),
                hash_context_value(seed, raw_value),
                now,
            )
            for key, raw_value in self._contexts.gather(principal).items()
        ]
        cookies.append(
            self._descriptor(self.cookie_name(ContextKey.LIVE.value, principal), str(int(now)), now)
        )

        logger.debug(
            f"Issued {len(cookies)} context cookies for session {principal.mask_session_for_logging()}"
        )
        return cookies

    def revoke_cookies(self, principal: Principal) -> List[CookieDescriptor]:
        """Compute immediate-expiry instructions for the principal's cookie set."""
        now = self._clock()
        return [self._descriptor(name, "", now).cleared() for name in self.cookie_names(principal)]

    # Checks

    async def matches(self, principal: Principal, context_key: str, value: str) -> bool:
        """Check a presented cookie value against the current seed."""
        raw_value = self._contexts.gather(principal).get(context_key)
        if raw_value is None:
            return False
        expected = hash_context_value(await self._seed_store.get_seed(), raw_value)
        return values_match(expected, value)

    def needs_boot(self, principal: Principal, cookies: Mapping[str, str]) -> bool:
        """Check if an authenticated request lacks the liveness cookie."""
        if not principal.is_authenticated:
            return False
        return self.cookie_name(ContextKey.LIVE.value, principal) not in cookies
