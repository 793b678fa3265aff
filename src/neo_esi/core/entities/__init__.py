"""Core entities."""

from .principal import Principal
from .cookie_descriptor import CookieDescriptor
from .component_descriptor import ComponentDescriptor
from .render_mode import RenderMode
from .fragment_request import FragmentRequest
from .rendered_fragment import RenderedFragment
from .fragment_response import FragmentResponse
from .component_settings import ComponentSettings

__all__ = [
    "Principal",
    "CookieDescriptor",
    "ComponentDescriptor",
    "RenderMode",
    "FragmentRequest",
    "RenderedFragment",
    "FragmentResponse",
    "ComponentSettings",
]
