"""Block component provider.

ONLY built-in block fragments - serves the host application's blocks through
the fragment path under the ``block`` component key. TTL and cache scope come
from the per-instance fragment settings, never from the requested path.

Following maximum separation architecture - one file = one purpose.
"""

import logging

from ...core.entities.fragment_request import FragmentRequest
from ...core.entities.principal import Principal
from ...core.entities.rendered_fragment import RenderedFragment
from ...core.protocols.block_renderer import BlockRenderer
from .settings_service import ComponentSettingsService

logger = logging.getLogger(__name__)


class BlockComponentProvider:
    """Renders host blocks as fragments."""

    KEY = "block"

    def __init__(self, renderer: BlockRenderer, settings_service: ComponentSettingsService):
        self._renderer = renderer
        self._settings_service = settings_service

    async def render(self, request: FragmentRequest, principal: Principal) -> RenderedFragment:
        settings = await self._settings_service.get(request.instance_id)
        if not settings.enabled:
            logger.debug(f"Block '{request.instance_id}' is not served as a fragment")
            return RenderedFragment(body="", ttl=0, cache_scope=settings.cache_scope)

        body = await self._renderer.render_block(
            request.module,
            request.delta,
            request.region,
            request.theme,
            request.page_path,
            principal,
        )
        if body is None:
            # Missing blocks are never cached
            logger.debug(f"Block '{request.instance_id}' rendered nothing")
            return RenderedFragment(body="", ttl=0, cache_scope=settings.cache_scope)

        return RenderedFragment(body=body, ttl=settings.ttl, cache_scope=settings.cache_scope)

    async def flush(self) -> None:
        """Blocks keep no provider-owned state."""
        return None
