"""Repository interfaces (ports) for the application layer.

Infrastructure implements these against Supabase; tests use fakes.
"""

from __future__ import annotations

from typing import Protocol

from app.domain.entities.material_line import MaterialLine


class IMaterialLineDirectory(Protocol):
    """Protocol for hostname -> material line lookups against the tenant store."""

    async def resolve(self, hostname: str, app_domain: str) -> MaterialLine | None:
        """Return the material line served at hostname, or None.

        Never raises: an unreachable directory is reported as None.
        """
        ...
