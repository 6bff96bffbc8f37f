"""Material line context for the current request.

The routing middleware stores the propagated context (header name ->
string) here and on request.state; the rendering layer reads it through
app.application.services.branding. Empty mapping means no material line.
"""

from collections.abc import Mapping
from contextvars import ContextVar
from types import MappingProxyType

_EMPTY: Mapping[str, str] = MappingProxyType({})

# Propagated material line context for the request (set by middleware, read by pages/API).
current_material_line_context: ContextVar[Mapping[str, str]] = ContextVar(
    "current_material_line_context", default=_EMPTY
)


def set_material_line_context(context: Mapping[str, str] | None) -> None:
    """Set the propagated context for this request; None clears it."""
    current_material_line_context.set(MappingProxyType(dict(context)) if context else _EMPTY)


def get_material_line_context() -> Mapping[str, str]:
    """Return the propagated context (read-only; empty when no material line)."""
    return current_material_line_context.get()
