"""Branding dependencies: the request's material line config for pages and API."""

from __future__ import annotations

from fastapi import Request

from app.application.dtos.material_line import MaterialLineConfig
from app.application.services.branding import material_line_from_headers
from app.core.tenant_context import get_material_line_context


def get_material_line_config(request: Request) -> MaterialLineConfig:
    """Return branding for this request; default branding when no material line resolved.

    Reads the context the routing middleware stored on request.state, falling
    back to the request-scoped context variable.
    """
    context = getattr(request.state, "material_line_context", None)
    if context is None:
        context = get_material_line_context()
    return material_line_from_headers(context)
