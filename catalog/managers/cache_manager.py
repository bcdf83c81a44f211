"""
Layered read cache with in-memory cache + Redis fallback.

Two-tier caching strategy:
1. In-memory cache (L1) - Fastest access, no network latency
2. Redis cache (L2) - Shared across instances, survives restarts

Entries expire after a fixed TTL and are never refreshed by reads, so a
value cached at time T is served unchanged until T + TTL even if the
underlying rows change in between.

Redis failures are logged and degrade to memory-only caching; they never
fail the request.
"""

import asyncio
import json
import time
from collections import OrderedDict
from typing import Any, Awaitable, Callable

from redis.exceptions import RedisError

from catalog.logging import logger
from catalog.settings import app_settings
from catalog.storage.redis import get_redis_connection
from catalog.utils.metrics import (
    cache_hits_total,
    cache_misses_total,
    memory_cache_evictions_total,
    memory_cache_size,
)

_MISSING = object()


class CacheEntry:
    """
    Cache entry with value and expiration time.

    Attributes:
        value: Cached value (any JSON-serializable type, including None).
        expires_at: Unix timestamp when entry expires (None = no expiry).
        last_accessed: Unix timestamp of last access (for LRU eviction).
    """

    __slots__ = ("value", "expires_at", "last_accessed")

    def __init__(self, value: Any, ttl: int | None = None) -> None:
        """
        Initialize cache entry.

        Args:
            value: Value to cache.
            ttl: Time-to-live in seconds (None = no expiry).
        """
        self.value = value
        self.expires_at = time.time() + ttl if ttl is not None else None
        self.last_accessed = time.time()

    def is_expired(self) -> bool:
        """Check if entry has expired."""
        if self.expires_at is None:
            return False
        return time.time() > self.expires_at

    def touch(self) -> None:
        """Update last access time (for LRU)."""
        self.last_accessed = time.time()


class CacheManager:
    """
    Layered cache manager with in-memory (L1) + Redis (L2) tiers.

    Features:
    - get-or-compute semantics for read-through caching
    - LRU eviction policy for memory cache
    - Automatic expiration handling
    - asyncio lock around the memory cache structure
    - Prometheus metrics for monitoring

    Concurrent misses on the same key are not coalesced: every caller
    computes the value and the last write wins.

    Example:
        >>> cache = CacheManager(max_memory_entries=1000)
        >>> authors = await cache.get_or_compute("authors", 60, load_authors)
        >>> await cache.invalidate("authors")
    """

    def __init__(
        self,
        max_memory_entries: int = 1000,
        default_ttl: int = 60,
        use_redis: bool = True,
    ) -> None:
        """
        Initialize cache manager.

        Args:
            max_memory_entries: Maximum entries in memory cache (LRU eviction).
            default_ttl: Default TTL in seconds for cached entries.
            use_redis: Whether to use Redis as the second tier.
        """
        self.max_memory_entries = max_memory_entries
        self.default_ttl = default_ttl
        self.use_redis = use_redis

        # In-memory cache (L1) - OrderedDict for LRU eviction
        self._memory_cache: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = asyncio.Lock()

        logger.info(
            f"Initialized CacheManager: max_memory_entries={max_memory_entries}, "
            f"default_ttl={default_ttl}s, use_redis={use_redis}"
        )

    async def get_or_compute(
        self,
        key: str,
        ttl: int | None,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        Exceptions raised by ``compute`` propagate and nothing is cached.

        Args:
            key: Cache key.
            ttl: Time-to-live in seconds (None = use default_ttl).
            compute: Coroutine function producing the value on a miss.

        Returns:
            Cached or freshly computed value.
        """
        value = await self._lookup(key)
        if value is not _MISSING:
            return value

        cache_misses_total.inc()
        logger.debug(f"Cache miss (both tiers): {key}")

        value = await compute()
        await self.set(key, value, ttl=ttl)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """
        Set value in both memory and Redis caches.

        Args:
            key: Cache key.
            value: Value to cache (must be JSON-serializable).
            ttl: Time-to-live in seconds (None = use default_ttl).
        """
        if ttl is None:
            ttl = self.default_ttl

        await self._set_memory(key, value, ttl=ttl)

        if not self.use_redis:
            return

        try:
            redis = await get_redis_connection()
            if redis is None:
                logger.warning("Redis unavailable, value cached in memory only")
                return

            await redis.setex(key, ttl, json.dumps(value))
            logger.debug(f"Cached in both tiers: {key} (TTL: {ttl}s)")

        except (RedisError, ConnectionError, OSError, TypeError) as ex:
            logger.error(f"Error writing to Redis cache: {ex}")

    async def invalidate(self, key: str) -> None:
        """
        Invalidate cache entry in both memory and Redis.

        Args:
            key: Cache key to invalidate.
        """
        async with self._lock:
            if self._memory_cache.pop(key, None) is not None:
                memory_cache_size.set(len(self._memory_cache))
                logger.debug(f"Invalidated memory cache: {key}")

        if not self.use_redis:
            return

        try:
            redis = await get_redis_connection()
            if redis is None:
                logger.warning("Redis unavailable, memory cache invalidated only")
                return

            if await redis.delete(key):
                logger.debug(f"Invalidated Redis cache: {key}")

        except (RedisError, ConnectionError, OSError) as ex:
            logger.error(f"Error invalidating Redis cache: {ex}")

    async def clear(self) -> None:
        """
        Clear the memory cache.

        Redis is shared across instances and is left untouched.
        """
        async with self._lock:
            self._memory_cache.clear()
            memory_cache_size.set(0)
            logger.info("Cleared memory cache")

    async def get_stats(self) -> dict[str, Any]:
        """
        Get cache statistics for monitoring.

        Returns:
            Dictionary with cache statistics.
        """
        async with self._lock:
            memory_size = len(self._memory_cache)

        return {
            "memory_cache_size": memory_size,
            "memory_cache_max": self.max_memory_entries,
            "memory_usage_percent": (
                (memory_size / self.max_memory_entries) * 100
                if self.max_memory_entries > 0
                else 0
            ),
            "default_ttl": self.default_ttl,
            "redis_enabled": self.use_redis,
        }

    async def _lookup(self, key: str) -> Any:
        """
        Look key up in memory, then Redis.

        A Redis hit populates the memory cache for the remaining Redis TTL.

        Returns:
            The cached value, or the ``_MISSING`` sentinel.
        """
        async with self._lock:
            entry = self._memory_cache.get(key)
            if entry is not None:
                if entry.is_expired():
                    del self._memory_cache[key]
                    memory_cache_size.set(len(self._memory_cache))
                    logger.debug(f"Memory cache expired: {key}")
                else:
                    entry.touch()
                    self._memory_cache.move_to_end(key)
                    cache_hits_total.labels(tier="memory").inc()
                    logger.debug(f"Memory cache hit: {key}")
                    return entry.value

        if not self.use_redis:
            return _MISSING

        try:
            redis = await get_redis_connection()
            if redis is None:
                logger.warning("Redis unavailable, cache lookup failed")
                return _MISSING

            cached_value = await redis.get(key)
            if cached_value is None:
                return _MISSING

            value = json.loads(cached_value)
            remaining = await redis.ttl(key)
            cache_hits_total.labels(tier="redis").inc()
            logger.debug(f"Redis cache hit: {key}")

            if remaining and remaining > 0:
                await self._set_memory(key, value, ttl=remaining)

            return value

        except (RedisError, ConnectionError, OSError, json.JSONDecodeError) as ex:
            logger.error(f"Error reading from Redis cache: {ex}")
            return _MISSING

    async def _set_memory(self, key: str, value: Any, ttl: int) -> None:
        """
        Set value in memory cache with LRU eviction.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time-to-live in seconds.
        """
        async with self._lock:
            self._memory_cache[key] = CacheEntry(value, ttl=ttl)
            self._memory_cache.move_to_end(key)

            if len(self._memory_cache) > self.max_memory_entries:
                oldest_key, _ = self._memory_cache.popitem(last=False)
                memory_cache_evictions_total.inc()
                logger.debug(
                    f"Evicted LRU entry: {oldest_key} "
                    f"(cache size: {len(self._memory_cache)})"
                )

            memory_cache_size.set(len(self._memory_cache))


# Global cache manager instance
_cache_manager: CacheManager | None = None


def get_cache_manager() -> CacheManager:
    """
    Get or create global cache manager instance (singleton).

    Returns:
        Global CacheManager instance configured from settings.
    """
    global _cache_manager

    if _cache_manager is None:
        _cache_manager = CacheManager(
            max_memory_entries=app_settings.CACHE_MAX_MEMORY_ENTRIES,
            default_ttl=app_settings.CACHE_TTL_SECONDS,
            use_redis=app_settings.CACHE_REDIS_ENABLED,
        )

    return _cache_manager
