"""Request context management using contextvars.

Provides async-safe storage for request-scoped data: the request ID (for
log correlation) and the authenticated user set by the routing middleware.

Usage:
    set_request_id("3f2c...")
    set_current_user(AuthUser(id="u1", email="a@example.com"))
    user = get_current_user()
"""

from contextvars import ContextVar

from app.application.dtos.user import AuthUser

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_user: ContextVar[AuthUser | None] = ContextVar("current_user", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the request ID for this context (e.g. request)."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request ID if set."""
    return _request_id.get()


def set_current_user(user: AuthUser | None) -> None:
    """Set the authenticated user for this request (None for anonymous)."""
    _current_user.set(user)


def get_current_user() -> AuthUser | None:
    """Return the authenticated user, or None if anonymous."""
    return _current_user.get()
