"""In-process tenant cache store (one per worker process)."""

from __future__ import annotations

import time

from app.infrastructure.cache.cache_protocol import CacheEntry


class InMemoryTenantCacheStore:
    """Dict-backed TenantCacheStore using time.monotonic.

    Grows by one entry per distinct hostname seen; entries are replaced,
    never evicted. Writes replace a single key, so concurrent requests can
    at worst lose an update and cause one extra directory query.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def set(self, key: str, entry: CacheEntry) -> None:
        self._entries[key] = entry

    def now(self) -> float:
        return time.monotonic()

    def __len__(self) -> int:
        return len(self._entries)
