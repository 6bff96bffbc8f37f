"""Domain enumerations for the countertop visualizer.

Enums represent fixed sets of domain values (e.g. organization role).
"""

from enum import Enum


class OrganizationRole(str, Enum):
    """Role of a profile within an organization.

    Owners and admins manage material lines, domains and team members;
    sales people receive lead notifications.
    """

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    SALES_PERSON = "sales_person"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings."""
        return [role.value for role in cls]

    @property
    def display_name(self) -> str:
        """Title-cased label (e.g. 'sales_person' -> 'Sales Person')."""
        return " ".join(word.capitalize() for word in self.value.split("_"))


# Roles allowed to manage an organization's material lines and team.
MANAGER_ROLES = frozenset({OrganizationRole.OWNER, OrganizationRole.ADMIN})
