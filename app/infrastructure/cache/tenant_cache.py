"""Tenant cache: time-bounded memoization in front of the material line directory."""

from __future__ import annotations

from app.application.interfaces.repositories import IMaterialLineDirectory
from app.core.constants import TENANT_CACHE_TTL_SECONDS
from app.domain.entities.material_line import MaterialLine
from app.infrastructure.cache.cache_protocol import CacheEntry, TenantCacheStore
from app.infrastructure.cache.memory_store import InMemoryTenantCacheStore
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class TenantCache:
    """Implements ITenantResolver: at most one entry per hostname, age-only expiry.

    Negative results (no material line) are cached like positive ones so
    unmapped hosts do not hit the directory on every request. Concurrent
    misses for the same hostname are not deduplicated; the last write wins.
    """

    def __init__(
        self,
        directory: IMaterialLineDirectory,
        store: TenantCacheStore | None = None,
        ttl_seconds: float = TENANT_CACHE_TTL_SECONDS,
    ) -> None:
        self.directory = directory
        self.store: TenantCacheStore = store if store is not None else InMemoryTenantCacheStore()
        self.ttl_seconds = ttl_seconds

    def _fresh(self, entry: CacheEntry | None) -> bool:
        return entry is not None and self.store.now() - entry.timestamp < self.ttl_seconds

    async def get_or_resolve(
        self, hostname: str, app_domain: str
    ) -> MaterialLine | None:
        """Return the cached result for hostname, resolving through the directory when stale.

        Args:
            hostname: Raw Host header value (case and port significant).
            app_domain: Effective app domain to resolve subdomains against.

        Returns:
            MaterialLine or None (possibly a cached negative).
        """
        entry = self.store.get(hostname)
        if entry is not None and self._fresh(entry):
            logger.debug("Tenant cache HIT: %s", hostname)
            return entry.material_line

        logger.debug("Tenant cache MISS: %s", hostname)
        material_line = await self.directory.resolve(hostname, app_domain)
        self.store.set(hostname, CacheEntry(material_line, self.store.now()))
        return material_line
