"""Fragment response entity.

ONLY response representation - status, bare body and cache headers of a
dispatched fragment. Never carries page chrome or a full error page.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Dict

NO_STORE = "no-cache, no-store, must-revalidate"


@dataclass(frozen=True)
class FragmentResponse:
    """HTTP response for one fragment."""

    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    media_type: str = "text/html; charset=utf-8"

    @classmethod
    def not_found(cls) -> "FragmentResponse":
        """Minimal not-found fragment."""
        return cls(status_code=404, body="", headers={"Cache-Control": NO_STORE})

    @classmethod
    def render_failed(cls) -> "FragmentResponse":
        """Minimal empty fragment for a failed render.

        Served as 200 so an assembling edge still completes the page.
        """
        return cls(
            status_code=200,
            body="",
            headers={"Cache-Control": NO_STORE, "X-ESI-Error": "render-failure"},
        )

    @property
    def is_empty(self) -> bool:
        return not self.body
