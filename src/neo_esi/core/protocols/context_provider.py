"""Context provider protocol."""

from typing import Mapping
from typing_extensions import Protocol, runtime_checkable

from ..entities.principal import Principal


@runtime_checkable
class ContextProvider(Protocol):
    """Source of named context values for a principal."""

    def provide(self, principal: Principal) -> Mapping[str, str]:
        """Get context values keyed by context key (e.g. ``ROLE``)."""
        ...
