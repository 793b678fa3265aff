"""Cookie descriptor entity.

ONLY cookie description - one context cookie to set on, or clear from, the
client. Computing descriptors is pure; applying them to an HTTP response is
the caller's job (see ``apply_to``).

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

# Expiry used for clearing instructions
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class CookieDescriptor:
    """A named context cookie with its session-cookie parameters."""

    name: str
    value: str
    expires: Optional[datetime] = None  # None = browser-session cookie
    path: str = "/"
    domain: Optional[str] = None
    secure: bool = False
    http_only: bool = True

    @property
    def is_clear(self) -> bool:
        """Check if this descriptor is an immediate-expiry clearing instruction."""
        return self.expires is not None and self.expires <= EPOCH

    def cleared(self) -> "CookieDescriptor":
        """Get the clearing instruction for this cookie name."""
        return CookieDescriptor(
            name=self.name,
            value="",
            expires=EPOCH,
            path=self.path,
            domain=self.domain,
            secure=self.secure,
            http_only=self.http_only,
        )

    def apply_to(self, response: Any) -> None:
        """Write this descriptor onto a Starlette/FastAPI response."""
        if self.is_clear:
            response.delete_cookie(
                key=self.name,
                path=self.path,
                domain=self.domain,
                secure=self.secure,
                httponly=self.http_only,
            )
            return

        response.set_cookie(
            key=self.name,
            value=self.value,
            expires=self.expires,
            path=self.path,
            domain=self.domain,
            secure=self.secure,
            httponly=self.http_only,
            samesite="lax",
        )
