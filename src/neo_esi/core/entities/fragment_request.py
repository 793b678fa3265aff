"""Fragment request entity.

ONLY decoded request representation - the component key and context
parameters parsed from an incoming fragment path. Lives for one dispatch.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Optional

from ..value_objects.cache_scope import CacheScope


@dataclass(frozen=True)
class FragmentRequest:
    """Decoded fragment path."""

    component_key: str
    theme: str
    region: str
    module: str
    delta: str
    page_path: Optional[str] = None
    cache_scope: CacheScope = CacheScope.GLOBAL

    @property
    def instance_id(self) -> str:
        """Identifier of the component instance (module:delta)."""
        return f"{self.module}:{self.delta}"

    @property
    def is_page_varying(self) -> bool:
        return self.page_path is not None
