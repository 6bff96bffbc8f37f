"""Core: config, constants, request-scoped material line context, and bootstrap."""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
