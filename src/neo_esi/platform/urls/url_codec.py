"""Fragment URL codec.

ONLY fragment path encoding - packs a component key and its context
parameters into a canonical, cache-key-safe path and parses it back:

    <prefix>/<component_key>/<theme>:<region>:<module>:<delta>[/<base64(page)>][/CACHE=USER|ROLE]

Paths carry only the *fact* that a fragment is personalized (the cache
scope marker), never a user id or role list, so the URL stays safely
cacheable by an edge device that does not vary on cookies.

Following maximum separation architecture - one file = one purpose.
"""

import base64
import binascii
import logging
import re
from typing import TYPE_CHECKING, Callable, List, Optional, Union

from ...config.settings import EsiSettings
from ...core.entities.fragment_request import FragmentRequest
from ...core.exceptions import FragmentEncodingError, MalformedRequest, UnknownComponent
from ...core.value_objects.cache_scope import MARKER_PREFIX, CacheScope

if TYPE_CHECKING:
    from ..components.registry_cache import RegistryCache

logger = logging.getLogger(__name__)

PostProcessor = Callable[[str, FragmentRequest], str]

# Characters that cannot appear in a packed parameter
FORBIDDEN_FIELD_CHARS = re.compile(r"[:/?#\s]")

MIN_SEGMENTS = 3
MAX_SEGMENTS = 5


def encode_page_path(page_path: str) -> str:
    """URL-safe base64 of the originating page path (never contains '/')."""
    return base64.urlsafe_b64encode(page_path.encode("utf-8")).decode("ascii")


def decode_page_path(segment: str) -> str:
    """Inverse of ``encode_page_path``; raises ValueError on invalid input."""
    if not segment:
        raise ValueError("Empty page context")
    try:
        raw = base64.b64decode(segment.encode("ascii"), altchars=b"-_", validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise ValueError(str(e)) from e


def _normalize_scope(cache_scope: Union[CacheScope, str, None]) -> CacheScope:
    if cache_scope is None:
        return CacheScope.GLOBAL
    if isinstance(cache_scope, CacheScope):
        return cache_scope
    try:
        return CacheScope(str(cache_scope).upper())
    except ValueError as e:
        raise FragmentEncodingError(
            f"Unknown cache scope: {cache_scope}", field="cache_scope", value=str(cache_scope)
        ) from e


class UrlCodec:
    """Encodes and decodes fragment paths."""

    def __init__(self, settings: EsiSettings, registry: Optional["RegistryCache"] = None):
        """Initialize URL codec.

        Args:
            settings: URL prefix, absolute URL usage and base URL
            registry: When given, component keys are checked against it
        """
        self._settings = settings
        self._registry = registry
        self._post_processors: List[PostProcessor] = []

    @property
    def prefix(self) -> str:
        return self._settings.url_prefix

    def add_post_processor(self, processor: PostProcessor) -> None:
        """Register a hook that may rewrite emitted URLs (e.g. to sign them)."""
        self._post_processors.append(processor)

    def _is_known(self, component_key: str) -> bool:
        return self._registry is None or self._registry.resolve(component_key) is not None

    # Encoding

    def build_request(
        self,
        component_key: str,
        region: str,
        theme: str,
        module: str,
        delta: str,
        cache_scope: Union[CacheScope, str, None] = CacheScope.GLOBAL,
        page_path: Optional[str] = None,
    ) -> FragmentRequest:
        """Validate encode parameters into a FragmentRequest."""
        fields = {
            "component_key": component_key,
            "theme": theme,
            "region": region,
            "module": module,
            "delta": delta,
        }
        for name, value in fields.items():
            value = "" if value is None else str(value)
            if not value or FORBIDDEN_FIELD_CHARS.search(value):
                raise FragmentEncodingError(
                    f"Fragment parameter '{name}' cannot be encoded: {value!r}",
                    field=name,
                    value=value,
                )
            fields[name] = value

        # An empty context has no base64 segment; the front page is "/"
        if page_path is not None and not page_path:
            raise FragmentEncodingError(
                "Page context cannot be empty",
                field="page_path",
                value=page_path,
            )

        if not self._is_known(fields["component_key"]):
            raise FragmentEncodingError(
                f"No component registered under '{component_key}'",
                field="component_key",
                value=component_key,
            )

        return FragmentRequest(
            page_path=page_path,
            cache_scope=_normalize_scope(cache_scope),
            **fields,
        )

    def encode_request(self, request: FragmentRequest) -> str:
        """Get the canonical fragment path of a request (no leading slash)."""
        params = ":".join((request.theme, request.region, request.module, request.delta))
        segments = [self.prefix, request.component_key, params]
        if request.page_path is not None:
            segments.append(encode_page_path(request.page_path))
        marker = request.cache_scope.marker
        if marker is not None:
            segments.append(marker)
        return "/".join(segments)

    def encode(
        self,
        component_key: str,
        region: str,
        theme: str,
        module: str,
        delta: str,
        cache_scope: Union[CacheScope, str, None] = CacheScope.GLOBAL,
        page_path: Optional[str] = None,
    ) -> str:
        """Get the canonical fragment path.

        ``page_path`` is only given for fragments that vary per page, and
        must not be empty.
        """
        return self.encode_request(
            self.build_request(component_key, region, theme, module, delta, cache_scope, page_path)
        )

    def fragment_url(
        self,
        component_key: str,
        region: str,
        theme: str,
        module: str,
        delta: str,
        cache_scope: Union[CacheScope, str, None] = CacheScope.GLOBAL,
        page_path: Optional[str] = None,
    ) -> str:
        """Get the URL to emit into page markup.

        Root-relative unless absolute URLs are configured, then passed
        through every post-processor in registration order.
        """
        request = self.build_request(component_key, region, theme, module, delta, cache_scope, page_path)
        path = self.encode_request(request)

        if self._settings.use_absolute_urls and self._settings.base_url:
            url = f"{self._settings.base_url}/{path}"
        else:
            url = f"/{path}"

        for processor in self._post_processors:
            url = processor(url, request)
        return url

    # Decoding

    def decode(self, path: str) -> FragmentRequest:
        """Parse a fragment path.

        Raises:
            MalformedRequest: the path does not follow the fragment syntax
            UnknownComponent: the component key is not registered
        """
        raw_path = path
        path = path.split("?", 1)[0].strip("/")
        segments = path.split("/")

        if not MIN_SEGMENTS <= len(segments) <= MAX_SEGMENTS:
            raise MalformedRequest.bad_segment_count(raw_path, len(segments))

        if segments[0] != self.prefix:
            raise MalformedRequest.bad_prefix(raw_path)

        component_key = segments[1]
        params = segments[2].split(":")
        if not component_key or len(params) != 4 or not all(params):
            raise MalformedRequest.bad_parameters(raw_path)
        theme, region, module, delta = params

        rest = segments[3:]
        cache_scope = CacheScope.GLOBAL
        if rest:
            try:
                marker_scope = CacheScope.from_marker(rest[-1])
            except ValueError:
                raise MalformedRequest.bad_cache_marker(raw_path)
            if marker_scope is not None:
                cache_scope = marker_scope
                rest = rest[:-1]

        if len(rest) > 1:
            raise MalformedRequest.bad_segment_count(raw_path, len(segments))

        page_path = None
        if rest:
            if rest[0].startswith(MARKER_PREFIX):
                raise MalformedRequest.bad_cache_marker(raw_path)
            try:
                page_path = decode_page_path(rest[0])
            except ValueError:
                raise MalformedRequest.bad_page_context(raw_path)

        if not self._is_known(component_key):
            raise UnknownComponent(component_key, path=raw_path)

        return FragmentRequest(
            component_key=component_key,
            theme=theme,
            region=region,
            module=module,
            delta=delta,
            page_path=page_path,
            cache_scope=cache_scope,
        )
