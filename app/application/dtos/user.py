"""DTOs for authenticated users and organization membership."""

from dataclasses import dataclass

from app.domain.enums import OrganizationRole


@dataclass(frozen=True)
class AuthUser:
    """User returned by the identity provider for a valid session."""

    id: str
    email: str | None = None


@dataclass(frozen=True)
class OrganizationMembership:
    """A profile's membership row in one organization."""

    organization_id: str
    profile_id: str
    role: OrganizationRole
