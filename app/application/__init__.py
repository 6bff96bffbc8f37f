"""Application layer: interfaces, DTOs, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (directory, identity provider).
"""

from app.application.interfaces import (
    IIdentityProvider,
    IMaterialLineDirectory,
    ISessionRefresher,
    ITenantResolver,
)

__all__ = [
    "IIdentityProvider",
    "IMaterialLineDirectory",
    "ISessionRefresher",
    "ITenantResolver",
]
