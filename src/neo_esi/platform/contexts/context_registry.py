"""Context provider registry.

ONLY context aggregation - queries every registered provider in
registration order and merges their contexts, later providers overwriting
earlier keys.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ...config.constants import ContextKey
from ...core.entities.principal import Principal
from ...core.protocols.context_provider import ContextProvider

logger = logging.getLogger(__name__)


class ContextRegistry:
    """Ordered set of context providers."""

    def __init__(self, providers: Optional[Sequence[ContextProvider]] = None):
        self._providers: List[ContextProvider] = list(providers or [])

    def register(self, provider: ContextProvider) -> None:
        """Append a provider; it can overwrite keys of earlier providers."""
        self._providers.append(provider)

    @property
    def providers(self) -> List[ContextProvider]:
        return list(self._providers)

    def gather(self, principal: Principal) -> Dict[str, str]:
        """Build the merged context for one principal.

        Entries with empty values are dropped. The liveness sentinel key is
        reserved for the cookie manager and never accepted from providers.
        """
        context: Dict[str, str] = {}
        for provider in self._providers:
            for key, value in provider.provide(principal).items():
                if key == ContextKey.LIVE.value:
                    logger.warning(
                        f"Context provider {type(provider).__name__} tried to supply reserved key {key}"
                    )
                    continue
                context[str(key)] = "" if value is None else str(value)

        return {key: value for key, value in context.items() if value}
