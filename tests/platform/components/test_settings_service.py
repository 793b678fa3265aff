"""Tests for component settings persistence."""

import pytest
from unittest.mock import AsyncMock, call

from redis.exceptions import ConnectionError as RedisConnectionError

from neo_esi.core.entities import ComponentSettings
from neo_esi.core.exceptions import PersistenceFailure
from neo_esi.core.value_objects import CacheScope
from neo_esi.platform.components import (
    ComponentSettingsService,
    MemorySettingsRepository,
    RedisSettingsRepository,
)


class TestComponentSettings:
    """Test settings entity."""

    def test_round_trip_through_dict(self):
        settings = ComponentSettings(enabled=True, ttl=60, cache_scope=CacheScope.ROLE, render_mode="ssi")

        assert ComponentSettings.from_dict(settings.to_dict()) == settings
        assert settings.to_dict()["cache_scope"] == "ROLE"

    def test_rejects_negative_ttl(self):
        with pytest.raises(ValueError):
            ComponentSettings(ttl=-1)


class TestComponentSettingsService:
    """Test reads with defaults and all-or-nothing writes."""

    @pytest.mark.asyncio
    async def test_unknown_instance_is_not_a_fragment(self):
        service = ComponentSettingsService(MemorySettingsRepository())

        settings = await service.get("user:login")

        assert settings == ComponentSettings()
        assert settings.enabled is False

    @pytest.mark.asyncio
    async def test_save_and_list(self):
        service = ComponentSettingsService(MemorySettingsRepository())
        settings = ComponentSettings(enabled=True, ttl=120)

        await service.save("user:login", settings)

        assert await service.get("user:login") == settings
        assert await service.list_all() == {"user:login": settings}
        assert await service.delete("user:login") is True
        assert await service.get("user:login") == ComponentSettings()

    @pytest.mark.asyncio
    async def test_failed_write_restores_previous_value(self):
        previous = ComponentSettings(enabled=True, ttl=60)
        repository = AsyncMock()
        repository.get.return_value = previous
        repository.save.side_effect = [ConnectionError("storage down"), None]
        service = ComponentSettingsService(repository)

        with pytest.raises(PersistenceFailure) as exc_info:
            await service.save("user:login", ComponentSettings(enabled=False))

        assert exc_info.value.key == "user:login"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert repository.save.await_args_list[-1] == call("user:login", previous)

    @pytest.mark.asyncio
    async def test_failed_first_write_removes_partial_value(self):
        repository = AsyncMock()
        repository.get.return_value = None
        repository.save.side_effect = ConnectionError("storage down")
        service = ComponentSettingsService(repository)

        with pytest.raises(PersistenceFailure):
            await service.save("user:login", ComponentSettings(enabled=True))

        repository.delete.assert_awaited_once_with("user:login")


class TestRedisSettingsRepository:
    """Test Redis settings storage."""

    @pytest.mark.asyncio
    async def test_get_decodes_json(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = b'{"enabled": true, "ttl": 30, "cache_scope": "USER"}'
        repository = RedisSettingsRepository(redis_client, key_prefix="esi:settings:")

        settings = await repository.get("user:login")

        assert settings == ComponentSettings(enabled=True, ttl=30, cache_scope=CacheScope.USER)
        redis_client.get.assert_awaited_once_with("esi:settings:user:login")

    @pytest.mark.asyncio
    async def test_write_error_becomes_persistence_failure(self):
        redis_client = AsyncMock()
        redis_client.set.side_effect = RedisConnectionError("down")
        repository = RedisSettingsRepository(redis_client)

        with pytest.raises(PersistenceFailure) as exc_info:
            await repository.save("user:login", ComponentSettings(enabled=True))

        assert exc_info.value.key == "esi:settings:user:login"
