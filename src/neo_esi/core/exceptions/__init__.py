"""Exception hierarchy for neo-esi."""

from .base import NeoEsiError, ConfigurationError, create_error_response
from .fragment import (
    FragmentEncodingError,
    FragmentRequestError,
    MalformedRequest,
    UnknownComponent,
    ProviderRenderFailure,
)
from .persistence import PersistenceFailure
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "NeoEsiError",
    "ConfigurationError",
    "create_error_response",
    "FragmentEncodingError",
    "FragmentRequestError",
    "MalformedRequest",
    "UnknownComponent",
    "ProviderRenderFailure",
    "PersistenceFailure",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
