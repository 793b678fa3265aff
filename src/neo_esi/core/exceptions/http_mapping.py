"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import ConfigurationError
from .fragment import (
    FragmentEncodingError,
    MalformedRequest,
    UnknownComponent,
    ProviderRenderFailure,
)
from .persistence import PersistenceFailure


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    FragmentEncodingError: 400,

    # 404 Not Found
    MalformedRequest: 404,
    UnknownComponent: 404,

    # 500 Internal Server Error
    ConfigurationError: 500,
    ProviderRenderFailure: 500,

    # 503 Service Unavailable
    PersistenceFailure: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit their parent's mapping.
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
