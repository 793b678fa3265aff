"""Fragment cache headers.

ONLY header computation - turns a fragment's ttl and cache scope into the
headers the edge device keys and expires its copy by.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Dict

from ...core.entities.fragment_response import NO_STORE
from ...core.value_objects.cache_scope import CacheScope

SCOPE_HEADER = "X-ESI-Cache-Scope"


def cache_headers(ttl: int, cache_scope: CacheScope) -> Dict[str, str]:
    """Get the cache headers for a rendered fragment.

    A ttl of 0 marks the fragment uncacheable. Personalized fragments are
    private and vary on the context cookies.
    """
    if ttl <= 0:
        return {"Cache-Control": NO_STORE}

    if not cache_scope.is_personalized:
        return {"Cache-Control": f"public, max-age={ttl}"}

    return {
        "Cache-Control": f"private, max-age={ttl}",
        SCOPE_HEADER: cache_scope.value,
        "Vary": "Cookie",
    }
