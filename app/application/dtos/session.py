"""DTOs for session refresh (identity provider tokens and cookie updates)."""

from dataclasses import dataclass, field

from app.application.dtos.user import AuthUser


@dataclass(frozen=True)
class SessionTokens:
    """Token pair issued by the identity provider on refresh."""

    access_token: str
    refresh_token: str
    expires_in: int
    user: AuthUser | None = None


@dataclass(frozen=True)
class CookieUpdate:
    """A cookie to set (value) or clear (value None) on the outgoing response."""

    name: str
    value: str | None
    max_age: int | None = None


@dataclass(frozen=True)
class SessionState:
    """Outcome of session refresh: the user (if any) and cookies to write back."""

    user: AuthUser | None = None
    cookies: tuple[CookieUpdate, ...] = field(default_factory=tuple)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
