"""Tests for the component registry."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from unittest.mock import MagicMock

from neo_esi.core.entities import ComponentDescriptor, RenderMode
from neo_esi.core.exceptions import UnknownComponent
from neo_esi.platform.components import RegistryBuilder, RegistryCache

from conftest import StaticProvider


class TestRegistryBuilder:
    """Test registration."""

    def test_later_registration_wins(self):
        first, second = StaticProvider("first"), StaticProvider("second")
        builder = RegistryBuilder()
        builder.register("block", first, source="module_a")
        builder.register("block", second, source="module_b")

        registry = builder.build()

        descriptor = registry.resolve("block")
        assert descriptor.provider is second
        assert descriptor.source == "module_b"
        assert len(registry) == 1

    def test_builtin_render_modes(self):
        registry = RegistryBuilder().build()

        assert set(registry.list_render_modes()) == {"esi", "ssi", "ssi_remote"}

    def test_alter_hook_adjusts_merged_result(self):
        builder = RegistryBuilder()
        builder.register("block", StaticProvider())
        builder.register("panel", StaticProvider())

        def drop_panels(components, render_modes):
            del components["panel"]
            del render_modes["ssi_remote"]

        registry = builder.build([drop_panels])

        assert "panel" not in registry
        assert "block" in registry
        assert registry.get_render_mode("ssi_remote") is None

    def test_registry_is_read_only(self):
        builder = RegistryBuilder()
        builder.register("block", StaticProvider())
        registry = builder.build()

        with pytest.raises(TypeError):
            registry.list_components()["other"] = None

    def test_require_unknown_component(self):
        with pytest.raises(UnknownComponent) as exc_info:
            RegistryBuilder().build().require("missing")

        assert exc_info.value.component_key == "missing"

    def test_invalid_component_key(self):
        with pytest.raises(ValueError):
            ComponentDescriptor(key="a/b", provider=StaticProvider())


class TestRegistryCache:
    """Test lazy build, flush and atomic publication."""

    def test_built_once_until_flush(self):
        contributor = MagicMock()
        cache = RegistryCache([contributor])

        first = cache.get()
        assert cache.get() is first
        assert contributor.call_count == 1
        assert cache.epoch == 1

        cache.flush()
        second = cache.get()

        assert second is not first
        assert contributor.call_count == 2
        assert cache.epoch == 2

    def test_register_after_build_triggers_rebuild(self):
        cache = RegistryCache()
        assert cache.resolve("late") is None

        provider = StaticProvider()
        cache.register("late", provider)

        assert cache.resolve("late").provider is provider

    def test_contributed_render_mode(self):
        def contribute(builder):
            builder.add_render_mode(
                RenderMode("hinclude", "hinclude", lambda url: f'<hx:include src="{url}"></hx:include>')
            )

        cache = RegistryCache([contribute])

        assert "hinclude" in cache.list_render_modes()

    def test_concurrent_readers_share_one_build(self):
        calls = []
        lock = threading.Lock()

        def slow_contributor(builder):
            with lock:
                calls.append(1)
            time.sleep(0.02)
            builder.register("block", StaticProvider())

        cache = RegistryCache([slow_contributor])

        with ThreadPoolExecutor(max_workers=8) as pool:
            registries = list(pool.map(lambda _: cache.get(), range(16)))

        assert len(calls) == 1
        assert all(registry is registries[0] for registry in registries)
        assert all("block" in registry for registry in registries)
