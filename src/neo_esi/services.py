"""Fragment service object graph.

ONLY wiring - builds every collaborator of the fragment service from
settings and startup contributions, choosing Redis or process-memory
storage. No module-level singletons: the graph is owned by whoever calls
``build_services`` (normally ``create_app``).
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from redis.asyncio import Redis

from .config.settings import EsiSettings
from .core.exceptions import ConfigurationError
from .core.protocols.block_renderer import BlockRenderer
from .core.protocols.context_provider import ContextProvider
from .platform.components import (
    AlterHook,
    BlockComponentProvider,
    BlockFragmentBuilder,
    ComponentSettingsService,
    Contributor,
    MemorySettingsRepository,
    RedisSettingsRepository,
    RegistryBuilder,
    RegistryCache,
)
from .platform.contexts import ContextRegistry, DefaultContextProvider
from .platform.cookies import CookieManager
from .platform.dispatch import EdgePurger, FragmentDispatcher, MemoryFragmentCache, RedisFragmentCache
from .platform.rendering import TagRenderer
from .platform.seeds import MemorySeedRepository, RedisSeedRepository, SeedStore
from .platform.urls import UrlCodec

logger = logging.getLogger(__name__)


@dataclass
class EsiServices:
    """Collaborators of one fragment service instance."""

    settings: EsiSettings
    seed_store: SeedStore
    contexts: ContextRegistry
    cookie_manager: CookieManager
    registry: RegistryCache
    codec: UrlCodec
    tag_renderer: TagRenderer
    dispatcher: FragmentDispatcher
    settings_service: ComponentSettingsService
    block_builder: Optional[BlockFragmentBuilder] = None
    redis_client: Optional[Redis] = None

    async def close(self) -> None:
        """Release the Redis connection pool, if any."""
        if self.redis_client is not None:
            await self.redis_client.aclose()
            logger.info("Closed Redis connection")


def build_services(
    settings: EsiSettings,
    contributors: Sequence[Contributor] = (),
    context_providers: Optional[Sequence[ContextProvider]] = None,
    alter_hooks: Sequence[AlterHook] = (),
    block_renderer: Optional[BlockRenderer] = None,
    redis_client: Optional[Redis] = None,
    edge_purgers: Sequence[EdgePurger] = (),
    clock: Callable[[], float] = time.time,
) -> EsiServices:
    """Build the fragment service.

    Args:
        settings: Service settings
        contributors: Startup registrations of components and render modes
        context_providers: Context sources in merge order, defaults to ROLE/USER
        alter_hooks: Adjust the merged registry before it is published
        block_renderer: Host block subsystem; enables the ``block`` component
        redis_client: Shared client, created from ``redis_url`` when omitted
        edge_purgers: Invalidation hooks for the edge device
        clock: Source of the current Unix time

    Raises:
        ConfigurationError: the default render mode is not registered
    """
    if redis_client is None and settings.uses_redis:
        redis_client = Redis.from_url(settings.redis_url)

    if redis_client is not None:
        seed_repository = RedisSeedRepository(redis_client, settings.seed_redis_key)
        settings_repository = RedisSettingsRepository(redis_client, settings.settings_redis_prefix)
        fragment_cache = RedisFragmentCache(redis_client)
        storage = "redis"
    else:
        seed_repository = MemorySeedRepository()
        settings_repository = MemorySettingsRepository()
        fragment_cache = MemoryFragmentCache()
        storage = "memory"

    settings_service = ComponentSettingsService(settings_repository)

    all_contributors = []
    if block_renderer is not None:
        block_provider = BlockComponentProvider(block_renderer, settings_service)

        def contribute_block(builder: RegistryBuilder) -> None:
            builder.register(BlockComponentProvider.KEY, block_provider, source=__name__)

        # Registered first so later contributors can override the block key
        all_contributors.append(contribute_block)
    all_contributors.extend(contributors)

    registry = RegistryCache(all_contributors, alter_hooks)
    if settings.render_mode not in registry.list_render_modes():
        raise ConfigurationError(
            f"Render mode '{settings.render_mode}' is not registered",
            details={"available": sorted(registry.list_render_modes())},
        )

    seed_store = SeedStore(seed_repository, settings.seed_rotation_interval, clock=clock)
    contexts = ContextRegistry(
        context_providers if context_providers is not None else [DefaultContextProvider()]
    )
    codec = UrlCodec(settings, registry)
    tag_renderer = TagRenderer(registry, settings)

    services = EsiServices(
        settings=settings,
        seed_store=seed_store,
        contexts=contexts,
        cookie_manager=CookieManager(contexts, seed_store, settings, clock=clock),
        registry=registry,
        codec=codec,
        tag_renderer=tag_renderer,
        dispatcher=FragmentDispatcher(codec, registry, settings, fragment_cache, edge_purgers),
        settings_service=settings_service,
        block_builder=(
            BlockFragmentBuilder(settings_service, codec, tag_renderer) if block_renderer is not None else None
        ),
        redis_client=redis_client,
    )
    logger.info(f"Built fragment service '{settings.app_name}' with {storage} storage")
    return services
