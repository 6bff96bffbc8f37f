"""Tests for SessionRefresher (token validation, rotation, cookie clearing)."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos.session import CookieUpdate, SessionTokens
from app.application.dtos.user import AuthUser
from app.domain.exceptions import IdentityProviderException
from app.infrastructure.security import SessionRefresher
from app.infrastructure.security.session import REFRESH_COOKIE_MAX_AGE

USER = AuthUser(id="user-1", email="owner@acme.com")


@pytest.fixture
def provider() -> AsyncMock:
    provider = AsyncMock()
    provider.get_user = AsyncMock(return_value=None)
    provider.refresh_session = AsyncMock(return_value=None)
    return provider


@pytest.fixture
def refresher(provider: AsyncMock) -> SessionRefresher:
    return SessionRefresher(provider, access_cookie="at", refresh_cookie="rt")


async def test_no_cookies_is_anonymous_without_calls(refresher, provider) -> None:
    state = await refresher.refresh({})
    assert not state.is_authenticated
    assert state.cookies == ()
    provider.get_user.assert_not_awaited()


async def test_valid_access_token_returns_user(refresher, provider) -> None:
    provider.get_user.return_value = USER
    state = await refresher.refresh({"at": "access", "rt": "refresh"})
    assert state.user == USER
    assert state.cookies == ()
    provider.refresh_session.assert_not_awaited()


async def test_rejected_access_without_refresh_clears_cookies(refresher) -> None:
    state = await refresher.refresh({"at": "stale"})
    assert not state.is_authenticated
    assert state.cookies == (CookieUpdate("at", None), CookieUpdate("rt", None))


async def test_rejected_refresh_clears_cookies(refresher, provider) -> None:
    state = await refresher.refresh({"at": "stale", "rt": "revoked"})
    provider.refresh_session.assert_awaited_once_with("revoked")
    assert not state.is_authenticated
    assert [c.value for c in state.cookies] == [None, None]


async def test_successful_refresh_rotates_cookies(refresher, provider) -> None:
    provider.refresh_session.return_value = SessionTokens(
        access_token="new-access", refresh_token="new-refresh", expires_in=3600, user=USER
    )
    state = await refresher.refresh({"rt": "refresh"})
    assert state.user == USER
    assert state.cookies == (
        CookieUpdate("at", "new-access", 3600),
        CookieUpdate("rt", "new-refresh", REFRESH_COOKIE_MAX_AGE),
    )
    provider.get_user.assert_not_awaited()


async def test_refresh_without_user_payload_fetches_user(refresher, provider) -> None:
    provider.refresh_session.return_value = SessionTokens(
        access_token="new-access", refresh_token="new-refresh", expires_in=60
    )
    provider.get_user.side_effect = [None, USER]
    state = await refresher.refresh({"at": "stale", "rt": "refresh"})
    assert state.user == USER
    assert provider.get_user.await_args_list[-1].args == ("new-access",)


async def test_provider_outage_is_anonymous_and_keeps_cookies(refresher, provider) -> None:
    provider.get_user.side_effect = IdentityProviderException("get_user", "HTTP 500")
    state = await refresher.refresh({"at": "access", "rt": "refresh"})
    assert not state.is_authenticated
    assert state.cookies == ()
