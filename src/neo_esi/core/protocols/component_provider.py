"""Component provider protocol.

ONLY fragment provider contract - render one fragment for a decoded request
and flush whatever the provider caches on its own.

Following maximum separation architecture - one file = one purpose.
"""

from typing import TYPE_CHECKING
from typing_extensions import Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..entities.fragment_request import FragmentRequest
    from ..entities.principal import Principal
    from ..entities.rendered_fragment import RenderedFragment


@runtime_checkable
class ComponentProvider(Protocol):
    """Pluggable fragment provider registered under a component key."""

    async def render(
        self,
        request: "FragmentRequest",
        principal: "Principal",
    ) -> "RenderedFragment":
        """Render the fragment body with its cache metadata."""
        ...

    async def flush(self) -> None:
        """Drop provider-owned cached state. Must be idempotent."""
        ...
