"""Inclusion tag rendering."""

from .render_modes import (
    builtin_render_modes,
    render_esi,
    render_ssi,
    render_ssi_remote,
)
from .tag_renderer import TagRenderer

__all__ = [
    "builtin_render_modes",
    "render_esi",
    "render_ssi",
    "render_ssi_remote",
    "TagRenderer",
]
