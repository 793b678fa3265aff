"""Component settings entity.

ONLY per-instance fragment settings - whether a component instance is served
as a fragment, for how long, and along which dimensions it varies.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..value_objects.cache_scope import CacheScope


@dataclass(frozen=True)
class ComponentSettings:
    """Fragment settings of one component instance."""

    enabled: bool = False
    ttl: Optional[int] = None
    cache_scope: CacheScope = CacheScope.GLOBAL
    page_varying: bool = False
    render_mode: Optional[str] = None

    def __post_init__(self) -> None:
        if self.ttl is not None and self.ttl < 0:
            raise ValueError("TTL cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["cache_scope"] = self.cache_scope.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentSettings":
        return cls(
            enabled=bool(data.get("enabled", False)),
            ttl=data.get("ttl"),
            cache_scope=CacheScope(data.get("cache_scope", CacheScope.GLOBAL.value)),
            page_varying=bool(data.get("page_varying", False)),
            render_mode=data.get("render_mode"),
        )
