"""Default context provider.

ONLY built-in contexts - the principal's role set and session identifier.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Dict

from ...config.constants import ContextKey
from ...core.entities.principal import Principal


class DefaultContextProvider:
    """Supplies ``ROLE`` (sorted, comma-joined roles) and ``USER`` (session id)."""

    def provide(self, principal: Principal) -> Dict[str, str]:
        return {
            ContextKey.ROLE.value: principal.role_list,
            ContextKey.USER.value: principal.session_id or "",
        }
