"""Security: session refresh against the identity provider."""

from app.infrastructure.security.session import SessionRefresher

__all__ = ["SessionRefresher"]
