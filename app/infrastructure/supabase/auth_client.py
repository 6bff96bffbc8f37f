"""Supabase Auth (GoTrue) REST client: session validation and rotation."""

from __future__ import annotations

from typing import Any

import httpx

from app.application.dtos.session import SessionTokens
from app.application.dtos.user import AuthUser
from app.domain.exceptions import IdentityProviderException

# Statuses GoTrue uses for invalid/expired tokens; these mean "no session", not an outage.
_REJECTED_STATUSES = frozenset({400, 401, 403, 404})


def _user_from_payload(payload: dict[str, Any] | None) -> AuthUser | None:
    if not payload or not payload.get("id"):
        return None
    return AuthUser(id=str(payload["id"]), email=payload.get("email"))


class SupabaseAuthClient:
    """Implements IIdentityProvider against {supabase_url}/auth/v1."""

    def __init__(self, http: httpx.AsyncClient, base_url: str, api_key: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        bearer: str | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Send a request; None for rejected tokens, raise IdentityProviderException otherwise."""
        headers = {"apikey": self._api_key, "Accept": "application/json"}
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        try:
            resp = await self._http.request(
                method, f"{self._base_url}{path}", headers=headers, json=json_body
            )
        except httpx.HTTPError as e:
            raise IdentityProviderException(operation, f"{type(e).__name__}: {e}") from e
        if resp.status_code in _REJECTED_STATUSES:
            return None
        if resp.status_code != 200:
            raise IdentityProviderException(operation, f"HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise IdentityProviderException(operation, "invalid JSON body") from e

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for access_token, or None if the token is rejected."""
        payload = await self._send("get_user", "GET", "/auth/v1/user", bearer=access_token)
        return _user_from_payload(payload)

    async def refresh_session(self, refresh_token: str) -> SessionTokens | None:
        """Rotate refresh_token into a new token pair, or None if it is rejected."""
        payload = await self._send(
            "refresh_session",
            "POST",
            "/auth/v1/token?grant_type=refresh_token",
            json_body={"refresh_token": refresh_token},
        )
        if not payload or not payload.get("access_token") or not payload.get("refresh_token"):
            return None
        return SessionTokens(
            access_token=payload["access_token"],
            refresh_token=payload["refresh_token"],
            expires_in=int(payload.get("expires_in") or 3600),
            user=_user_from_payload(payload.get("user")),
        )
