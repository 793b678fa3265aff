"""Tests for the HTTP surface."""

import pytest
from unittest.mock import AsyncMock

from fastapi import Request
from fastapi.testclient import TestClient

from neo_esi.app import create_app
from neo_esi.config.settings import EsiSettings
from neo_esi.core.entities import ComponentSettings, Principal
from neo_esi.core.exceptions import ConfigurationError, PersistenceFailure
from neo_esi.services import build_services

from conftest import StaticProvider


class PrincipalHolder:
    """Lets a test choose the principal the host auth layer would set."""

    def __init__(self):
        self.principal = None


@pytest.fixture
def holder():
    return PrincipalHolder()


@pytest.fixture
def provider():
    return StaticProvider(body="<nav>menu</nav>", ttl=120)


@pytest.fixture
def services(provider, clock):
    def contribute(builder):
        builder.register("static", provider, source="tests")

    block_renderer = AsyncMock()
    block_renderer.render_block.return_value = "<div>Login</div>"
    return build_services(
        EsiSettings(_env_file=None),
        contributors=[contribute],
        block_renderer=block_renderer,
        clock=clock,
    )


@pytest.fixture
def client(services, holder):
    app = create_app(services=services)

    @app.middleware("http")
    async def fake_auth(request: Request, call_next):
        if holder.principal is not None:
            request.state.principal = holder.principal
        return await call_next(request)

    with TestClient(app) as test_client:
        yield test_client


class TestFragmentEndpoint:
    """Test fragment delivery over HTTP."""

    def test_serves_fragment(self, client, provider):
        response = client.get("/esi/static/bartik:sidebar:user:login")

        assert response.status_code == 200
        assert response.text == "<nav>menu</nav>"
        assert response.headers["cache-control"] == "public, max-age=120"
        assert response.headers["content-type"].startswith("text/html")

    def test_malformed_path_is_empty_not_found(self, client):
        response = client.get("/esi/static/not-a-fragment")

        assert response.status_code == 404
        assert response.text == ""
        assert "no-store" in response.headers["cache-control"]

    def test_unknown_component_is_empty_not_found(self, client):
        response = client.get("/esi/missing/bartik:sidebar:user:login")

        assert response.status_code == 404
        assert response.text == ""

    def test_block_component_is_registered(self, client, services):
        client.portal.call(services.settings_service.save, "user:login", ComponentSettings(enabled=True))

        response = client.get("/esi/block/bartik:sidebar:user:login/L25vZGUvNQ==")

        assert response.status_code == 200
        assert response.text == "<div>Login</div>"

    def test_principal_reaches_provider(self, client, holder, provider, editor):
        holder.principal = editor

        client.get("/esi/static/bartik:sidebar:user:login/CACHE=ROLE")

        _, principal = provider.calls[-1]
        assert principal == editor


class TestContextCookieBoot:
    """Test the liveness cookie boot check."""

    def test_authenticated_request_without_sentinel_gets_cookies(self, client, holder, editor):
        holder.principal = editor

        response = client.get("/esi/static/bartik:sidebar:user:login")

        names = {header.split("=", 1)[0] for header in response.headers.get_list("set-cookie")}
        assert names == {"ESI_ROLE", "ESI_USER", "ESI_LIVE"}

    def test_sentinel_present_skips_boot(self, client, holder, editor):
        holder.principal = editor
        client.cookies.set("ESI_LIVE", "1700000000")

        response = client.get("/esi/static/bartik:sidebar:user:login")

        assert response.headers.get_list("set-cookie") == []

    def test_anonymous_request_gets_no_cookies(self, client):
        response = client.get("/esi/static/bartik:sidebar:user:login")

        assert response.headers.get_list("set-cookie") == []


class TestAdminEndpoints:
    """Test maintenance endpoints."""

    def test_flush_requires_admin_role(self, client, holder, editor):
        holder.principal = editor

        assert client.post("/admin/esi/flush").status_code == 403

    def test_flush(self, client, holder, admin, provider):
        holder.principal = admin

        response = client.post("/admin/esi/flush")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert set(body["data"]["providers_flushed"]) == {"block", "static"}
        assert provider.flushes == 1

    def test_rotate_seed(self, client, holder, admin):
        holder.principal = admin

        first = client.post("/admin/esi/seed/rotate").json()["data"]["last_changed"]
        second = client.post("/admin/esi/seed/rotate").json()["data"]["last_changed"]

        assert second > first

    def test_persistence_failure_is_json_503(self, client, holder, admin, services):
        holder.principal = admin
        services.dispatcher.flush = AsyncMock(side_effect=PersistenceFailure("down", store="redis", key="esi:"))

        response = client.post("/admin/esi/flush")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "PersistenceFailure"


class TestBuildServices:
    """Test service wiring."""

    def test_unknown_default_render_mode(self):
        with pytest.raises(ConfigurationError):
            build_services(EsiSettings(_env_file=None, render_mode="varnish-magic"))

    def test_block_builder_only_with_renderer(self):
        assert build_services(EsiSettings(_env_file=None)).block_builder is None
