"""Fragment dispatcher.

ONLY fragment delivery - decodes an incoming fragment path, resolves its
component, renders it and emits a bare fragment response with cache
headers. Also owns the administrative flush of the fragment namespace.

A broken fragment never breaks the page it is embedded in: every failure
on the fragment path degrades to a minimal empty response.

Following maximum separation architecture - one file = one purpose.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from ...config.settings import EsiSettings
from ...core.entities.fragment_request import FragmentRequest
from ...core.entities.fragment_response import FragmentResponse
from ...core.entities.principal import Principal
from ...core.entities.rendered_fragment import RenderedFragment
from ...core.exceptions import FragmentRequestError, ProviderRenderFailure
from ...core.protocols.fragment_cache import FragmentCache
from ...core.value_objects.cache_scope import CacheScope
from ..components.registry_cache import RegistryCache
from ..urls.url_codec import UrlCodec
from .cache_control import cache_headers

logger = logging.getLogger(__name__)

# Receives the URL prefix of the fragment namespace
EdgePurger = Callable[[str], Awaitable[None]]

_SCOPE_RANK = {CacheScope.GLOBAL: 0, CacheScope.ROLE: 1, CacheScope.USER: 2}


def narrowest_scope(first: CacheScope, second: CacheScope) -> CacheScope:
    """Get the more personalized of two scopes."""
    return first if _SCOPE_RANK[first] >= _SCOPE_RANK[second] else second


class FragmentDispatcher:
    """Serves fragment paths through the component registry."""

    def __init__(
        self,
        codec: UrlCodec,
        registry: RegistryCache,
        settings: EsiSettings,
        fragment_cache: Optional[FragmentCache] = None,
        edge_purgers: Sequence[EdgePurger] = (),
    ):
        """Initialize fragment dispatcher.

        Args:
            codec: Fragment path codec
            registry: Component registry owner
            settings: Default TTL and cache prefix
            fragment_cache: Server-side store of rendered bodies, optional
            edge_purgers: Hooks asking the edge device to drop the namespace
        """
        self._codec = codec
        self._registry = registry
        self._settings = settings
        self._fragment_cache = fragment_cache
        self._edge_purgers: List[EdgePurger] = list(edge_purgers)

    def add_edge_purger(self, purger: EdgePurger) -> None:
        self._edge_purgers.append(purger)

    @property
    def cache_prefix(self) -> str:
        return self._settings.fragment_cache_prefix

    def cache_key(self, request: FragmentRequest, principal: Principal) -> Optional[str]:
        """Get the fragment cache key of a request for a principal.

        Returns None for USER-scoped requests of a principal with neither a
        user id nor a session id; such output is never stored server-side.
        """
        key = f"{self.cache_prefix}{self._codec.encode_request(request)}"
        if request.cache_scope is CacheScope.ROLE:
            return f"{key}:{principal.role_list}"
        if request.cache_scope is CacheScope.USER:
            owner = principal.user_id or principal.session_id
            return f"{key}:{owner}" if owner else None
        return key

    async def dispatch(self, raw_path: str, principal: Optional[Principal] = None) -> FragmentResponse:
        """Serve one fragment path."""
        principal = principal or Principal.anonymous()

        try:
            request = self._codec.decode(raw_path)
            descriptor = self._registry.get().require(request.component_key)
        except FragmentRequestError as e:
            logger.debug(f"Fragment request '{raw_path}' rejected ({e.reason}): {e.message}")
            return FragmentResponse.not_found()
        except Exception:
            # Registry contributors and alter hooks run on first access
            logger.exception(f"Component registry unavailable while resolving '{raw_path}'")
            return FragmentResponse.render_failed()

        cache_key = self.cache_key(request, principal)
        cached = await self._read_cache(cache_key)
        if cached is not None:
            body, ttl, scope = cached
            logger.debug(f"Fragment cache hit for '{request.component_key}' ({request.instance_id})")
            return FragmentResponse(status_code=200, body=body, headers=cache_headers(ttl, scope))

        try:
            rendered = await descriptor.provider.render(request, principal)
        except Exception as e:
            failure = ProviderRenderFailure(request.component_key, e)
            failure.__cause__ = e
            logger.exception(f"{failure.message} (path '{raw_path}')")
            return FragmentResponse.render_failed()

        ttl = rendered.ttl if rendered.ttl is not None else self._settings.default_ttl
        scope = narrowest_scope(request.cache_scope, rendered.cache_scope)

        # Only cache under the key the path promised; a provider narrowing the
        # scope beyond the URL marker would otherwise share personal output
        if scope is request.cache_scope:
            await self._write_cache(cache_key, rendered, ttl, scope)

        return FragmentResponse(status_code=200, body=rendered.body, headers=cache_headers(ttl, scope))

    async def _read_cache(self, key: Optional[str]) -> Optional[Tuple[str, int, CacheScope]]:
        if self._fragment_cache is None or key is None:
            return None
        raw = await self._fragment_cache.get(key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
            return data["body"], int(data["ttl"]), CacheScope(data["scope"])
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding unreadable fragment cache entry '{key}': {e}")
            return None

    async def _write_cache(
        self, key: Optional[str], rendered: RenderedFragment, ttl: int, scope: CacheScope
    ) -> None:
        if self._fragment_cache is None or key is None or ttl <= 0:
            return
        payload = json.dumps({"body": rendered.body, "ttl": ttl, "scope": scope.value})
        await self._fragment_cache.set(key, payload, ttl)

    async def flush(self) -> Dict[str, Any]:
        """Flush the fragment namespace.

        Calls every provider's flush, deletes the cached fragment bodies,
        drops the component registry and asks the edge purgers to invalidate
        the fragment URLs. Safe to run repeatedly.

        Returns:
            Summary of what was flushed
        """
        registry = self._registry.get()
        flushed: List[str] = []
        failed: List[str] = []

        for key, descriptor in registry.list_components().items():
            try:
                await descriptor.provider.flush()
                flushed.append(key)
            except Exception as e:
                logger.error(f"Flush of component '{key}' failed: {e}")
                failed.append(key)

        deleted = 0
        if self._fragment_cache is not None:
            deleted = await self._fragment_cache.delete_prefix(self.cache_prefix)

        self._registry.flush()

        url_prefix = f"/{self._settings.url_prefix}/"
        purged = 0
        purges_failed = 0
        for purge in self._edge_purgers:
            try:
                await purge(url_prefix)
                purged += 1
            except Exception as e:
                logger.error(f"Edge purge of '{url_prefix}' failed: {e}")
                purges_failed += 1

        logger.info(
            f"Fragment namespace flushed: {len(flushed)} providers, "
            f"{deleted} cached fragments, {purged} edge purges"
        )
        return {
            "providers_flushed": flushed,
            "providers_failed": failed,
            "cache_entries_deleted": deleted,
            "edge_purges": purged,
            "edge_purges_failed": purges_failed,
        }
