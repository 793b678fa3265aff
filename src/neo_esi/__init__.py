"""Neo-ESI - edge-cacheable page fragments for the NeoMultiTenant platform.

Delivers independently cacheable fragments to an edge cache (ESI/SSI), with
seed-hashed context cookies the edge can vary on without ever seeing raw
identity.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import EsiSettings, get_settings, ContextKey, RenderModeKey

from .core.exceptions import (
    NeoEsiError,
    ConfigurationError,
    FragmentEncodingError,
    FragmentRequestError,
    MalformedRequest,
    UnknownComponent,
    ProviderRenderFailure,
    PersistenceFailure,
)

from .core.entities import (
    Principal,
    CookieDescriptor,
    ComponentDescriptor,
    ComponentSettings,
    FragmentRequest,
    FragmentResponse,
    RenderedFragment,
    RenderMode,
)
from .core.value_objects import CacheScope, Seed

from .platform.seeds import SeedStore
from .platform.contexts import ContextRegistry, DefaultContextProvider
from .platform.cookies import CookieManager
from .platform.components import (
    RegistryBuilder,
    RegistryCache,
    ComponentSettingsService,
    BlockComponentProvider,
    BlockFragmentBuilder,
)
from .platform.urls import UrlCodec
from .platform.rendering import TagRenderer
from .platform.dispatch import FragmentDispatcher

from .services import EsiServices, build_services
from .app import create_app

__all__ = [
    "__version__",
    # Configuration
    "EsiSettings",
    "get_settings",
    "ContextKey",
    "RenderModeKey",
    # Exceptions
    "NeoEsiError",
    "ConfigurationError",
    "FragmentEncodingError",
    "FragmentRequestError",
    "MalformedRequest",
    "UnknownComponent",
    "ProviderRenderFailure",
    "PersistenceFailure",
    # Domain
    "Principal",
    "CookieDescriptor",
    "ComponentDescriptor",
    "ComponentSettings",
    "FragmentRequest",
    "FragmentResponse",
    "RenderedFragment",
    "RenderMode",
    "CacheScope",
    "Seed",
    # Services
    "SeedStore",
    "ContextRegistry",
    "DefaultContextProvider",
    "CookieManager",
    "RegistryBuilder",
    "RegistryCache",
    "ComponentSettingsService",
    "BlockComponentProvider",
    "BlockFragmentBuilder",
    "UrlCodec",
    "TagRenderer",
    "FragmentDispatcher",
    "EsiServices",
    "build_services",
    "create_app",
]
