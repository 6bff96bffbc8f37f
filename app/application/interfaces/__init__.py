"""Application ports: repository and service protocols."""

from app.application.interfaces.repositories import IMaterialLineDirectory
from app.application.interfaces.services import (
    IIdentityProvider,
    ISessionRefresher,
    ITenantResolver,
)

__all__ = [
    "IIdentityProvider",
    "IMaterialLineDirectory",
    "ISessionRefresher",
    "ITenantResolver",
]
