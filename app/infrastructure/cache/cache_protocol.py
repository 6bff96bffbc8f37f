"""Cache protocol for the tenant cache (DIP).

The store owns the hostname -> entry mapping and the clock, so tests can
swap in a fake clock and assert TTL boundaries deterministically.
"""

from dataclasses import dataclass
from typing import Protocol

from app.domain.entities.material_line import MaterialLine


@dataclass(frozen=True)
class CacheEntry:
    """Resolution result for one hostname; material_line None is a cached negative."""

    material_line: MaterialLine | None
    timestamp: float


class TenantCacheStore(Protocol):
    """Protocol for tenant cache storage. Keys are raw hostnames."""

    def get(self, key: str) -> CacheEntry | None:
        """Return the stored entry regardless of age, or None."""
        ...

    def set(self, key: str, entry: CacheEntry) -> None:
        """Replace the entry for key."""
        ...

    def now(self) -> float:
        """Return the current time in seconds (monotonic)."""
        ...
