"""Component descriptor entity."""

from dataclasses import dataclass
from typing import Optional

from ..protocols.component_provider import ComponentProvider


@dataclass(frozen=True)
class ComponentDescriptor:
    """A registered fragment provider.

    Keys are unique within a registry; registering the same key again
    replaces the earlier descriptor.
    """

    key: str
    provider: ComponentProvider
    source: Optional[str] = None  # module locator of the contributing code

    def __post_init__(self) -> None:
        if not self.key or "/" in self.key:
            raise ValueError(f"Invalid component key: {self.key!r}")
