"""Application DTOs (no persistence or HTTP dependency)."""

from app.application.dtos.material_line import (
    DEFAULT_MATERIAL_LINE_CONFIG,
    MaterialLineConfig,
)
from app.application.dtos.session import CookieUpdate, SessionState, SessionTokens
from app.application.dtos.user import AuthUser, OrganizationMembership

__all__ = [
    "DEFAULT_MATERIAL_LINE_CONFIG",
    "AuthUser",
    "CookieUpdate",
    "MaterialLineConfig",
    "OrganizationMembership",
    "SessionState",
    "SessionTokens",
]
