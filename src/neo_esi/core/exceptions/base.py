"""Base exceptions for neo-esi.

This module defines the base exception hierarchy for the fragment service.
All exceptions inherit from NeoEsiError and include error codes and details
for logging and administrative API responses.
"""

from typing import Any, Dict, Optional


class NeoEsiError(Exception):
    """Base exception for all neo-esi errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NeoEsiError):
    """Raised when service configuration is invalid."""
    pass


def create_error_response(exception: NeoEsiError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-esi exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
