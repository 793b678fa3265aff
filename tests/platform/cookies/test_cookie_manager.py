"""Tests for the context cookie manager."""

import re

import pytest
from starlette.responses import Response

from neo_esi.config.settings import EsiSettings
from neo_esi.core.entities import Principal
from neo_esi.core.entities.cookie_descriptor import EPOCH
from neo_esi.platform.contexts import ContextRegistry, DefaultContextProvider
from neo_esi.platform.cookies import CookieManager, hash_context_value, values_match

HEX32 = re.compile(r"^[0-9a-f]{32}$")


class LanguageProvider:
    """Adds a LANG context and overrides ROLE."""

    def provide(self, principal):
        return {"LANG": "de", "ROLE": "custom-role"}


class SentinelProvider:
    def provide(self, principal):
        return {"LIVE": "0"}


def by_name(cookies):
    return {cookie.name: cookie for cookie in cookies}


class TestValueHasher:
    """Test the one-way cookie value transform."""

    def test_hash_is_32_hex_chars(self):
        assert HEX32.match(hash_context_value(b"s" * 32, "editor"))

    def test_hash_depends_on_seed_and_value(self):
        base = hash_context_value(b"s" * 32, "editor")

        assert hash_context_value(b"s" * 32, "editor") == base
        assert hash_context_value(b"t" * 32, "editor") != base
        assert hash_context_value(b"s" * 32, "admin") != base

    def test_values_match(self):
        value = hash_context_value(b"s" * 32, "editor")

        assert values_match(value, value)
        assert not values_match(value, "0" * 32)


class TestIssueCookies:
    """Test cookie issuance."""

    @pytest.mark.asyncio
    async def test_issues_hashed_contexts_and_sentinel(self, cookie_manager, seed_store, editor, clock):
        cookies = by_name(await cookie_manager.issue_cookies(editor))
        seed = await seed_store.get_seed()

        assert list(cookies) == ["ESI_ROLE", "ESI_USER", "ESI_LIVE"]
        assert cookies["ESI_ROLE"].value == hash_context_value(seed, "authenticated,editor")
        assert cookies["ESI_USER"].value == hash_context_value(seed, editor.session_id)
        assert cookies["ESI_LIVE"].value == str(int(clock.now))

    @pytest.mark.asyncio
    async def test_values_never_contain_raw_context(self, cookie_manager, editor):
        cookies = by_name(await cookie_manager.issue_cookies(editor))

        for name in ("ESI_ROLE", "ESI_USER"):
            assert HEX32.match(cookies[name].value)
            assert "editor" not in cookies[name].value
            assert editor.session_id not in cookies[name].value

    @pytest.mark.asyncio
    async def test_issue_is_deterministic_except_sentinel(self, cookie_manager, editor, clock):
        first = by_name(await cookie_manager.issue_cookies(editor))
        clock.advance(5)
        second = by_name(await cookie_manager.issue_cookies(editor))

        assert first["ESI_ROLE"] == second["ESI_ROLE"]
        assert first["ESI_USER"] == second["ESI_USER"]
        assert first["ESI_LIVE"].value != second["ESI_LIVE"].value

    @pytest.mark.asyncio
    async def test_anonymous_principal_has_no_user_cookie(self, cookie_manager):
        cookies = by_name(await cookie_manager.issue_cookies(Principal.anonymous()))

        assert list(cookies) == ["ESI_ROLE", "ESI_LIVE"]

    @pytest.mark.asyncio
    async def test_session_cookie_baseline(self, contexts, seed_store, editor, clock):
        settings = EsiSettings(
            _env_file=None,
            cookie_domain=".example.com",
            cookie_secure=True,
            cookie_lifetime=3600,
        )
        manager = CookieManager(contexts, seed_store, settings, clock=clock)

        for cookie in await manager.issue_cookies(editor):
            assert cookie.domain == ".example.com"
            assert cookie.secure is True
            assert cookie.http_only is True
            assert cookie.expires.timestamp() == clock.now + 3600

    @pytest.mark.asyncio
    async def test_later_providers_overwrite_keys(self, seed_store, settings, editor, clock):
        contexts = ContextRegistry([DefaultContextProvider(), LanguageProvider()])
        manager = CookieManager(contexts, seed_store, settings, clock=clock)
        seed = await seed_store.get_seed()

        cookies = by_name(await manager.issue_cookies(editor))

        assert cookies["ESI_ROLE"].value == hash_context_value(seed, "custom-role")
        assert cookies["ESI_LANG"].value == hash_context_value(seed, "de")

    @pytest.mark.asyncio
    async def test_providers_cannot_supply_sentinel(self, seed_store, settings, editor, clock):
        contexts = ContextRegistry([DefaultContextProvider(), SentinelProvider()])
        manager = CookieManager(contexts, seed_store, settings, clock=clock)

        cookies = await manager.issue_cookies(editor)

        assert [cookie.name for cookie in cookies].count("ESI_LIVE") == 1
        assert by_name(cookies)["ESI_LIVE"].value == str(int(clock.now))


class TestHardening:
    """Test cookie name hardening."""

    @pytest.mark.asyncio
    async def test_hardening_changes_names_only(self, contexts, seed_store, editor, clock):
        plain = CookieManager(contexts, seed_store, EsiSettings(_env_file=None), clock=clock)
        hardened = CookieManager(
            contexts, seed_store, EsiSettings(_env_file=None, harden_cookie_names=True), clock=clock
        )

        plain_cookies = await plain.issue_cookies(editor)
        hardened_cookies = await hardened.issue_cookies(editor)

        suffix = hardened.hardening_suffix(editor)
        assert re.match(r"^[0-9a-f]{8}$", suffix)
        assert [cookie.name for cookie in hardened_cookies] == [
            f"{cookie.name}_{suffix}" for cookie in plain_cookies
        ]
        assert [cookie.value for cookie in hardened_cookies] == [cookie.value for cookie in plain_cookies]

    def test_suffix_is_session_scoped(self, contexts, seed_store, clock):
        manager = CookieManager(
            contexts, seed_store, EsiSettings(_env_file=None, harden_cookie_names=True), clock=clock
        )
        first = Principal.authenticated("1", "session-one-000000", ["a"])
        second = Principal.authenticated("1", "session-two-000000", ["a"])

        assert manager.hardening_suffix(first) != manager.hardening_suffix(second)


class TestRevokeCookies:
    """Test cookie revocation."""

    @pytest.mark.asyncio
    async def test_revoke_clears_every_issued_name(self, cookie_manager, editor):
        issued = await cookie_manager.issue_cookies(editor)
        revoked = cookie_manager.revoke_cookies(editor)

        assert [cookie.name for cookie in revoked] == [cookie.name for cookie in issued]
        for cookie in revoked:
            assert cookie.is_clear
            assert cookie.value == ""
            assert cookie.expires == EPOCH

    def test_apply_to_response(self, cookie_manager, editor):
        response = Response()

        for cookie in cookie_manager.revoke_cookies(editor):
            cookie.apply_to(response)

        headers = response.headers.getlist("set-cookie")
        assert len(headers) == 3
        assert all("Max-Age=0" in header or "expires=" in header.lower() for header in headers)


class TestCookieChecks:
    """Test matching and the boot check."""

    @pytest.mark.asyncio
    async def test_matches_current_seed_only(self, cookie_manager, seed_store, editor):
        role = by_name(await cookie_manager.issue_cookies(editor))["ESI_ROLE"].value

        assert await cookie_manager.matches(editor, "ROLE", role)

        await seed_store.rotate_seed()
        assert not await cookie_manager.matches(editor, "ROLE", role)

    @pytest.mark.asyncio
    async def test_matches_unknown_context(self, cookie_manager, editor):
        assert not await cookie_manager.matches(editor, "LANG", "0" * 32)

    def test_needs_boot(self, cookie_manager, editor):
        assert cookie_manager.needs_boot(editor, {})
        assert not cookie_manager.needs_boot(editor, {"ESI_LIVE": "1700000000"})
        assert not cookie_manager.needs_boot(Principal.anonymous(), {})
