"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from app.application.dtos.session import SessionState, SessionTokens
from app.application.dtos.user import AuthUser
from app.domain.entities.material_line import MaterialLine


class IIdentityProvider(Protocol):
    """Protocol for the external identity provider (session validation and rotation)."""

    async def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for a valid access token, None if the token is rejected."""
        ...

    async def refresh_session(self, refresh_token: str) -> SessionTokens | None:
        """Exchange a refresh token for a new token pair, None if it is rejected."""
        ...


class ISessionRefresher(Protocol):
    """Protocol for per-request session refresh against the identity provider."""

    async def refresh(self, cookies: Mapping[str, str]) -> SessionState:
        """Return the session user and the cookie updates to write back."""
        ...


class ITenantResolver(Protocol):
    """Protocol for cached hostname -> material line resolution."""

    async def get_or_resolve(
        self, hostname: str, app_domain: str
    ) -> MaterialLine | None:
        """Return the (possibly cached) material line for hostname."""
        ...
