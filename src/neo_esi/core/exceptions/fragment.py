"""Fragment path exceptions.

Raised while encoding, decoding, resolving and rendering fragments. Every
fragment-path failure degrades to a minimal fragment response; these types
only tell the dispatcher which one.
"""

from typing import Optional

from .base import NeoEsiError


class FragmentEncodingError(NeoEsiError):
    """Raised when component parameters cannot be packed into a fragment path."""

    def __init__(self, message: str, *, field: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message, details={"field": field, "value": value})
        self.field = field
        self.value = value


class FragmentRequestError(NeoEsiError):
    """Base class for incoming fragment requests that cannot be served."""

    def __init__(self, message: str, *, path: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(message, details={"path": path, "reason": reason})
        self.path = path
        self.reason = reason


class MalformedRequest(FragmentRequestError):
    """Raised when a fragment path does not match the fragment path syntax."""

    @classmethod
    def bad_segment_count(cls, path: str, count: int) -> "MalformedRequest":
        return cls(f"Fragment path has {count} segments", path=path, reason="segment_count")

    @classmethod
    def bad_parameters(cls, path: str) -> "MalformedRequest":
        return cls("Fragment parameters must be theme:region:module:delta", path=path, reason="parameters")

    @classmethod
    def bad_page_context(cls, path: str) -> "MalformedRequest":
        return cls("Page context is not valid base64", path=path, reason="page_context")

    @classmethod
    def bad_cache_marker(cls, path: str) -> "MalformedRequest":
        return cls("Unrecognised cache scope marker", path=path, reason="cache_marker")

    @classmethod
    def bad_prefix(cls, path: str) -> "MalformedRequest":
        return cls("Path is outside the fragment namespace", path=path, reason="prefix")


class UnknownComponent(FragmentRequestError):
    """Raised when a decoded component key has no registered provider."""

    def __init__(self, component_key: str, *, path: Optional[str] = None):
        super().__init__(
            f"No component registered under '{component_key}'",
            path=path,
            reason="unknown_component",
        )
        self.component_key = component_key
        self.details["component_key"] = component_key


class ProviderRenderFailure(NeoEsiError):
    """Raised when a component provider's render contract fails.

    The provider's original exception is chained as ``__cause__``.
    """

    def __init__(self, component_key: str, error: BaseException):
        super().__init__(
            f"Component '{component_key}' failed to render: {error}",
            details={"component_key": component_key, "error_type": type(error).__name__},
        )
        self.component_key = component_key
        self.error = error
