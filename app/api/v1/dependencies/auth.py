"""Auth dependencies: the user established by the routing middleware's session refresh."""

from __future__ import annotations

from fastapi import Request

from app.application.dtos.user import AuthUser
from app.domain.exceptions import AuthenticationException
from app.shared.context import get_current_user


def get_optional_user(request: Request) -> AuthUser | None:
    """Return the session user, or None for anonymous requests.

    Falls back to the request-scoped current user when request.state was not populated.
    """
    user = getattr(request.state, "user", None)
    if user is None:
        user = get_current_user()
    return user


def require_user(request: Request) -> AuthUser:
    """Return the session user; raise AuthenticationException when anonymous."""
    user = get_optional_user(request)
    if user is None:
        raise AuthenticationException("Sign in required")
    return user
