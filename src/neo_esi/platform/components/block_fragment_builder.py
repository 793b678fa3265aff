"""Block fragment builder.

ONLY page-side emission - decides whether a block instance is replaced by
an inclusion tag and builds that tag from the instance settings.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Optional

from ..rendering.tag_renderer import TagRenderer
from ..urls.url_codec import UrlCodec
from .block_provider import BlockComponentProvider
from .settings_service import ComponentSettingsService

logger = logging.getLogger(__name__)


class BlockFragmentBuilder:
    """Builds the page markup that stands in for a fragment block."""

    def __init__(
        self,
        settings_service: ComponentSettingsService,
        codec: UrlCodec,
        renderer: TagRenderer,
    ):
        self._settings_service = settings_service
        self._codec = codec
        self._renderer = renderer

    async def build(
        self,
        module: str,
        delta: str,
        region: str,
        theme: str,
        page_path: Optional[str] = None,
    ) -> Optional[str]:
        """Get the inclusion markup for a block.

        Returns None when the instance is not configured as a fragment; the
        caller then renders the block inline.
        """
        settings = await self._settings_service.get(f"{module}:{delta}")
        if not settings.enabled:
            return None

        context_path = page_path if settings.page_varying and page_path else None
        url = self._codec.fragment_url(
            BlockComponentProvider.KEY,
            region=region,
            theme=theme,
            module=module,
            delta=delta,
            cache_scope=settings.cache_scope,
            page_path=context_path,
        )
        logger.debug(f"Block '{module}:{delta}' emitted as fragment {url}")
        return self._renderer.render_fragment(url, mode=settings.render_mode, page_path=page_path)
