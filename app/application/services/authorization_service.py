"""Authorization: organization role capability checks.

One place for "does this membership carry one of these roles" so that
endpoints do not compare role strings ad hoc.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.application.dtos.user import OrganizationMembership
from app.domain.enums import OrganizationRole
from app.domain.exceptions import AuthorizationException


def has_role(
    membership: OrganizationMembership | None,
    organization_id: str,
    roles: Iterable[OrganizationRole],
) -> bool:
    """Return True if membership belongs to organization_id and its role is in roles."""
    if membership is None or membership.organization_id != organization_id:
        return False
    return membership.role in set(roles)


def require_role(
    membership: OrganizationMembership | None,
    organization_id: str,
    roles: Iterable[OrganizationRole],
) -> OrganizationMembership:
    """Return membership if it passes has_role; raise AuthorizationException otherwise."""
    allowed = list(roles)
    if membership is None or not has_role(membership, organization_id, allowed):
        raise AuthorizationException(
            organization_id=organization_id,
            required_roles=sorted(role.value for role in allowed),
        )
    return membership
