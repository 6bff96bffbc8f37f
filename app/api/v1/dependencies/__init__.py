"""Presentation-layer dependency injection.

Routes depend on these instead of reading request.state directly.
"""

from app.api.v1.dependencies.auth import get_optional_user, require_user
from app.api.v1.dependencies.branding import get_material_line_config

__all__ = [
    "get_material_line_config",
    "get_optional_user",
    "require_user",
]
