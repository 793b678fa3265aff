"""Pytest configuration and fixtures for neo-esi tests."""

import pytest
from typing import List, Optional, Tuple

from neo_esi.config.settings import EsiSettings
from neo_esi.core.entities import FragmentRequest, Principal, RenderedFragment
from neo_esi.core.value_objects import CacheScope
from neo_esi.platform.components import RegistryBuilder, RegistryCache
from neo_esi.platform.contexts import ContextRegistry, DefaultContextProvider
from neo_esi.platform.cookies import CookieManager
from neo_esi.platform.seeds import MemorySeedRepository, SeedStore
from neo_esi.platform.urls import UrlCodec

NOW = 1_700_000_000.0


class FixedClock:
    """Controllable replacement for time.time."""

    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StaticProvider:
    """Component provider returning a fixed body."""

    def __init__(
        self,
        body: str = "<p>fragment</p>",
        ttl: Optional[int] = None,
        cache_scope: CacheScope = CacheScope.GLOBAL,
    ):
        self.body = body
        self.ttl = ttl
        self.cache_scope = cache_scope
        self.calls: List[Tuple[FragmentRequest, Principal]] = []
        self.flushes = 0

    async def render(self, request: FragmentRequest, principal: Principal) -> RenderedFragment:
        self.calls.append((request, principal))
        return RenderedFragment(body=self.body, ttl=self.ttl, cache_scope=self.cache_scope)

    async def flush(self) -> None:
        self.flushes += 1


class FailingProvider:
    """Component provider whose render contract always raises."""

    async def render(self, request, principal):
        raise RuntimeError("template exploded")

    async def flush(self) -> None:
        raise RuntimeError("flush exploded")


@pytest.fixture
def clock():
    """Frozen clock."""
    return FixedClock()


@pytest.fixture
def settings():
    """Default settings without environment files."""
    return EsiSettings(_env_file=None)


@pytest.fixture
def seed_store(clock):
    """Seed store on an empty in-memory repository."""
    return SeedStore(MemorySeedRepository(), rotation_interval=86400, clock=clock)


@pytest.fixture
def contexts():
    """Context registry with the default ROLE/USER provider."""
    return ContextRegistry([DefaultContextProvider()])


@pytest.fixture
def cookie_manager(contexts, seed_store, settings, clock):
    return CookieManager(contexts, seed_store, settings, clock=clock)


@pytest.fixture
def editor():
    """Authenticated principal with two roles."""
    return Principal.authenticated(
        user_id="42",
        session_id="sess-0123456789abcdef",
        roles=["editor", "authenticated"],
    )


@pytest.fixture
def admin():
    return Principal.authenticated(
        user_id="1",
        session_id="sess-admin-0123456789",
        roles=["administrator", "authenticated"],
    )


@pytest.fixture
def static_provider():
    return StaticProvider()


@pytest.fixture
def registry(static_provider):
    """Registry cache with a ``static`` component."""
    def contribute(builder: RegistryBuilder) -> None:
        builder.register("static", static_provider, source="tests")

    return RegistryCache([contribute])


@pytest.fixture
def codec(settings):
    """URL codec without component key checks."""
    return UrlCodec(settings)
