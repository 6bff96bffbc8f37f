"""Shared utilities: request context and telemetry.

Used by application, infrastructure, and middleware. No business logic.
"""

from app.shared.context import (
    get_current_user,
    get_request_id,
    set_current_user,
    set_request_id,
)

__all__ = [
    "get_current_user",
    "get_request_id",
    "set_current_user",
    "set_request_id",
]
