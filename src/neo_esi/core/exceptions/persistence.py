"""Persistence exceptions."""

from typing import Optional

from .base import NeoEsiError


class PersistenceFailure(NeoEsiError):
    """Raised when a storage write or read fails.

    Writers roll back their attempted change before raising; callers never
    observe a partial write.
    """

    def __init__(self, message: str, *, store: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message, details={"store": store, "key": key})
        self.store = store
        self.key = key
