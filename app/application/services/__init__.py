"""Application services: context propagation, branding, authorization."""

from app.application.services.authorization_service import has_role, require_role
from app.application.services.branding import (
    generate_theme_styles,
    material_line_from_headers,
)
from app.application.services.context_propagation import build_context, write_context

__all__ = [
    "build_context",
    "generate_theme_styles",
    "has_role",
    "material_line_from_headers",
    "require_role",
    "write_context",
]
