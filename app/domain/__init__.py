"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import KitchenImage, MaterialLine
from app.domain.enums import MANAGER_ROLES, OrganizationRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CountertopException,
    DirectoryUnavailableException,
    IdentityProviderException,
)

__all__ = [
    # Entities
    "KitchenImage",
    "MaterialLine",
    # Enums
    "MANAGER_ROLES",
    "OrganizationRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "CountertopException",
    "DirectoryUnavailableException",
    "IdentityProviderException",
]
