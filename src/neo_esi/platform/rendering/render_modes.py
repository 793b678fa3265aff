"""Built-in render modes.

ONLY inclusion templates - the literal ESI / SSI markup that asks an edge
device to fetch a fragment URL.

Following maximum separation architecture - one file = one purpose.
"""

from typing import List

from ...config.constants import RenderModeKey
from ...core.entities.render_mode import RenderMode

# Characters that would break out of the quoted attribute
_ATTRIBUTE_ESCAPES = str.maketrans({'"': "%22", "<": "%3C", ">": "%3E"})


def attribute_safe(url: str) -> str:
    """Percent-encode characters that cannot appear inside a quoted attribute."""
    return url.translate(_ATTRIBUTE_ESCAPES)


def render_esi(url: str) -> str:
    return f'<esi:include src="{attribute_safe(url)}" />'


def render_ssi(url: str) -> str:
    return f'<!--# include virtual="{attribute_safe(url)}" -->'


def render_ssi_remote(url: str) -> str:
    return f'<!--# include url="{attribute_safe(url)}" -->'


def builtin_render_modes() -> List[RenderMode]:
    """The render modes every registry starts with."""
    return [
        RenderMode(RenderModeKey.ESI.value, "Edge Side Includes", render_esi),
        RenderMode(RenderModeKey.SSI.value, "Server Side Includes", render_ssi),
        RenderMode(RenderModeKey.SSI_REMOTE.value, "Server Side Includes (remote URL)", render_ssi_remote),
    ]
