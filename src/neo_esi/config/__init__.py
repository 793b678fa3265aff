"""Configuration module for neo-esi."""

from .constants import (
    ContextKey,
    RenderModeKey,
    CookieDefaults,
    SeedDefaults,
    FragmentDefaults,
)
from .settings import EsiSettings, get_settings
from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "ContextKey",
    "RenderModeKey",
    "CookieDefaults",
    "SeedDefaults",
    "FragmentDefaults",
    "EsiSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
