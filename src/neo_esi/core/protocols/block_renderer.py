"""Block renderer protocol.

ONLY block subsystem contract - the host application's block rendering,
consumed by the built-in block component provider.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from ..entities.principal import Principal


@runtime_checkable
class BlockRenderer(Protocol):
    """Renders one block of the host application."""

    async def render_block(
        self,
        module: str,
        delta: str,
        region: str,
        theme: str,
        page_path: Optional[str],
        principal: Principal,
    ) -> Optional[str]:
        """Get the block's HTML, None if the block does not exist."""
        ...
