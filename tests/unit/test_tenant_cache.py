"""Tests for TenantCache (TTL boundaries, negative caching, raw hostname keys)."""

from unittest.mock import AsyncMock

import pytest

from app.core.constants import TENANT_CACHE_TTL_SECONDS
from app.infrastructure.cache import InMemoryTenantCacheStore, TenantCache
from tests.conftest import FakeClockStore


@pytest.fixture
def store() -> FakeClockStore:
    return FakeClockStore()


@pytest.fixture
def directory(acme):
    directory = AsyncMock()
    directory.resolve = AsyncMock(return_value=acme)
    return directory


def test_default_ttl_is_sixty_seconds(directory) -> None:
    cache = TenantCache(directory)
    assert TENANT_CACHE_TTL_SECONDS == 60.0
    assert cache.ttl_seconds == 60.0
    assert isinstance(cache.store, InMemoryTenantCacheStore)


async def test_second_lookup_within_ttl_does_not_query_directory(directory, store, acme) -> None:
    cache = TenantCache(directory, store)
    first = await cache.get_or_resolve("acme.example.com", "example.com")
    store.advance(59.9)
    second = await cache.get_or_resolve("acme.example.com", "example.com")
    assert first is acme
    assert second is acme
    directory.resolve.assert_awaited_once_with("acme.example.com", "example.com")


async def test_lookup_after_ttl_queries_directory_exactly_once_more(directory, store) -> None:
    cache = TenantCache(directory, store)
    await cache.get_or_resolve("acme.example.com", "example.com")
    store.advance(60.0)
    await cache.get_or_resolve("acme.example.com", "example.com")
    await cache.get_or_resolve("acme.example.com", "example.com")
    assert directory.resolve.await_count == 2


async def test_negative_result_is_cached(store) -> None:
    directory = AsyncMock()
    directory.resolve = AsyncMock(return_value=None)
    cache = TenantCache(directory, store)
    assert await cache.get_or_resolve("unknown.example.com", "example.com") is None
    assert await cache.get_or_resolve("unknown.example.com", "example.com") is None
    directory.resolve.assert_awaited_once()
    assert store.entries["unknown.example.com"].material_line is None


async def test_hostname_keys_are_not_normalized(directory, store) -> None:
    """Case and port are significant: each raw hostname gets its own entry."""
    cache = TenantCache(directory, store)
    await cache.get_or_resolve("acme.example.com", "example.com")
    await cache.get_or_resolve("ACME.example.com", "example.com")
    await cache.get_or_resolve("acme.example.com:443", "example.com")
    assert directory.resolve.await_count == 3
    assert set(store.entries) == {
        "acme.example.com",
        "ACME.example.com",
        "acme.example.com:443",
    }


async def test_refresh_replaces_entry_timestamp(directory, store) -> None:
    cache = TenantCache(directory, store)
    await cache.get_or_resolve("acme.example.com", "example.com")
    store.advance(61)
    await cache.get_or_resolve("acme.example.com", "example.com")
    assert store.entries["acme.example.com"].timestamp == store.clock


def test_in_memory_store_replaces_entries() -> None:
    from app.infrastructure.cache import CacheEntry

    store = InMemoryTenantCacheStore()
    store.set("a.example.com", CacheEntry(None, 1.0))
    store.set("a.example.com", CacheEntry(None, 2.0))
    assert len(store) == 1
    assert store.get("a.example.com").timestamp == 2.0
    assert store.get("b.example.com") is None
    assert store.now() > 0
