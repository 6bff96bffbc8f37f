"""Domain exceptions for the countertop visualizer.

Defines domain-level exceptions that represent business rule violations
and unavailable collaborators. Presentation layer maps them to HTTP
responses in exception handlers; the routing middleware catches them and
degrades instead.
"""

from typing import Any


class CountertopException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, hostname).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationException(CountertopException):
    """Raised when authentication fails (e.g. expired or revoked session)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CountertopException):
    """Raised when the user lacks the organization role required for the operation."""

    def __init__(
        self,
        organization_id: str | None = None,
        required_roles: list[str] | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional organization and the roles that would have passed.

        Args:
            organization_id: Organization the check ran against.
            required_roles: Role values that satisfy the check.
            message: Human-readable message.
        """
        details: dict[str, Any] = {}
        if organization_id:
            details["organization_id"] = organization_id
        if required_roles:
            details["required_roles"] = required_roles
        super().__init__(message, "PERMISSION_DENIED", details)


class DirectoryUnavailableException(CountertopException):
    """Raised when the tenant directory (Supabase REST) cannot be queried."""

    def __init__(self, table: str, reason: str) -> None:
        super().__init__(
            f"Tenant directory unavailable while querying {table}",
            "DIRECTORY_UNAVAILABLE",
            {"table": table, "reason": reason},
        )


class IdentityProviderException(CountertopException):
    """Raised when the identity provider returns an unexpected response."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Identity provider error during {operation}",
            "IDENTITY_PROVIDER_ERROR",
            {"operation": operation, "reason": reason},
        )
