"""Tag renderer.

ONLY inclusion markup - turns a fragment URL into the edge-specific
inclusion syntax of the selected render mode.

Following maximum separation architecture - one file = one purpose.
"""

import html
import logging
from typing import TYPE_CHECKING, Optional
from urllib.parse import urlencode

from ...config.settings import EsiSettings

if TYPE_CHECKING:
    from ..components.registry_cache import RegistryCache

logger = logging.getLogger(__name__)


class TagRenderer:
    """Renders inclusion tags with per-fragment or global render mode."""

    def __init__(self, registry: "RegistryCache", settings: EsiSettings):
        self._registry = registry
        self._settings = settings

    def render(self, url: str, mode: Optional[str] = None) -> str:
        """Get the inclusion tag for ``url``.

        The explicit ``mode`` wins over the configured default. An unknown
        mode renders nothing.
        """
        key = mode or self._settings.render_mode
        render_mode = self._registry.get().get_render_mode(key)
        if render_mode is None:
            logger.debug(f"Unknown render mode '{key}', fragment left empty")
            return ""
        return render_mode(url)

    def render_fragment(
        self,
        url: str,
        mode: Optional[str] = None,
        page_path: Optional[str] = None,
    ) -> str:
        """Get the page markup for a fragment slot.

        With AJAX fallback enabled the tag is wrapped in a placeholder the
        client-side loader fills when no edge device processed the tag.
        """
        tag = self.render(url, mode)
        if not self._settings.ajax_fallback:
            return tag

        src = url
        if self._settings.ajax_contextualize and page_path:
            separator = "&" if "?" in url else "?"
            src = f"{url}{separator}{urlencode({'page': page_path})}"

        return f'<div class="esi-fragment" data-esi-src="{html.escape(src, quote=True)}">{tag}</div>'
