"""Principal entity.

ONLY principal representation - the identity a request acts for, as far as
fragment context derivation needs it. Authentication itself belongs to the
host application.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from ...config.constants import FragmentDefaults


@dataclass(frozen=True)
class Principal:
    """Anonymous or authenticated request principal."""

    user_id: Optional[str] = None
    session_id: Optional[str] = None
    roles: FrozenSet[str] = field(default_factory=frozenset)
    is_authenticated: bool = False

    @classmethod
    def anonymous(cls, session_id: Optional[str] = None) -> "Principal":
        """Create an unauthenticated principal with the anonymous role."""
        return cls(
            session_id=session_id,
            roles=frozenset({FragmentDefaults.ANONYMOUS_ROLE}),
            is_authenticated=False,
        )

    @classmethod
    def authenticated(
        cls,
        user_id: str,
        session_id: str,
        roles: Iterable[str] = (),
    ) -> "Principal":
        """Create an authenticated principal."""
        if not user_id:
            raise ValueError("Authenticated principal requires a user id")
        return cls(
            user_id=str(user_id),
            session_id=session_id,
            roles=frozenset(str(role) for role in roles),
            is_authenticated=True,
        )

    @property
    def role_list(self) -> str:
        """Sorted, comma-joined role identifiers."""
        return ",".join(sorted(self.roles))

    def mask_session_for_logging(self) -> str:
        """Return masked session id safe for logging."""
        if not self.session_id or len(self.session_id) <= 12:
            return "***"
        return f"{self.session_id[:4]}...{self.session_id[-4:]}"
