"""Cache: in-process tenant cache in front of the material line directory.

TenantCache holds the TTL policy; storage and clock come from a
TenantCacheStore (InMemoryTenantCacheStore by default).
"""

from app.infrastructure.cache.cache_protocol import CacheEntry, TenantCacheStore
from app.infrastructure.cache.memory_store import InMemoryTenantCacheStore
from app.infrastructure.cache.tenant_cache import TenantCache

__all__ = [
    "CacheEntry",
    "InMemoryTenantCacheStore",
    "TenantCache",
    "TenantCacheStore",
]
