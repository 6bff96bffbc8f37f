"""Session refresh against the identity provider.

Runs once per request before routing. Validates the access token cookie,
rotates the token pair with the refresh cookie when the access token is
rejected, and reports cookie updates for the response. Provider outages
yield an anonymous session; they never fail the request.
"""

from __future__ import annotations

from collections.abc import Mapping

from app.application.dtos.session import CookieUpdate, SessionState
from app.application.interfaces.services import IIdentityProvider
from app.domain.exceptions import IdentityProviderException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Refresh cookie lifetime (400 days, the browser cap for persistent cookies).
REFRESH_COOKIE_MAX_AGE = 400 * 24 * 60 * 60


class SessionRefresher:
    """Implements ISessionRefresher using an IIdentityProvider."""

    def __init__(
        self,
        identity_provider: IIdentityProvider,
        access_cookie: str,
        refresh_cookie: str,
    ) -> None:
        self.identity_provider = identity_provider
        self.access_cookie = access_cookie
        self.refresh_cookie = refresh_cookie

    def _cleared(self) -> tuple[CookieUpdate, ...]:
        return (
            CookieUpdate(self.access_cookie, None),
            CookieUpdate(self.refresh_cookie, None),
        )

    async def refresh(self, cookies: Mapping[str, str]) -> SessionState:
        """Return the session for the request cookies.

        Args:
            cookies: Request cookies (name -> value).

        Returns:
            SessionState with user None when there is no valid session.
        """
        access_token = cookies.get(self.access_cookie)
        refresh_token = cookies.get(self.refresh_cookie)
        if not access_token and not refresh_token:
            return SessionState()

        try:
            if access_token:
                user = await self.identity_provider.get_user(access_token)
                if user is not None:
                    return SessionState(user=user)
            if not refresh_token:
                return SessionState(cookies=self._cleared())

            tokens = await self.identity_provider.refresh_session(refresh_token)
            if tokens is None:
                logger.info("Refresh token rejected; clearing session cookies")
                return SessionState(cookies=self._cleared())

            user = tokens.user
            if user is None:
                user = await self.identity_provider.get_user(tokens.access_token)
            return SessionState(
                user=user,
                cookies=(
                    CookieUpdate(self.access_cookie, tokens.access_token, tokens.expires_in),
                    CookieUpdate(
                        self.refresh_cookie, tokens.refresh_token, REFRESH_COOKIE_MAX_AGE
                    ),
                ),
            )
        except IdentityProviderException as e:
            logger.warning(
                "Session refresh unavailable (%s): %s",
                e.details.get("operation"),
                e.details.get("reason"),
            )
            return SessionState()
