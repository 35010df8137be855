"""
Cache Manager - In-memory caching in front of an optional Redis/MongoDB store
"""
from typing import Optional, Any, Awaitable, Callable
from datetime import datetime, timedelta
import logging


logger = logging.getLogger(__name__)


class CacheManager:
    """
    Two-tier caching system: Memory (fast) + Redis/MongoDB (persistent)
    """

    enabled = True

    def __init__(self, backend, memory_ttl_seconds: int = 60, max_memory_entries: int = 1024):
        self.backend = backend
        self.memory_ttl_seconds = memory_ttl_seconds
        self.max_memory_entries = max_memory_entries
        self._memory_cache: dict = {}
        self._cache_stats = {
            'hits': 0,
            'misses': 0,
            'memory_hits': 0,
            'backend_hits': 0
        }

    @property
    def backend_name(self) -> str:
        return getattr(self.backend, "name", type(self.backend).__name__)

    async def get(self, key: str) -> Optional[Any]:
        """Get from cache (memory first, then backend)"""
        if key in self._memory_cache:
            entry = self._memory_cache[key]
            if entry['expires_at'] > datetime.utcnow():
                self._cache_stats['hits'] += 1
                self._cache_stats['memory_hits'] += 1
                return entry['value']
            else:
                del self._memory_cache[key]

        value = await self.backend.get(f"cache:{key}")
        if value is not None:
            self._cache_stats['hits'] += 1
            self._cache_stats['backend_hits'] += 1
            self._remember(key, value, self.memory_ttl_seconds)
            return value

        self._cache_stats['misses'] += 1
        return None

    async def set(self, key: str, value: Any, ttl_seconds: int = 300) -> None:
        """Set cache value in both tiers"""
        self._remember(key, value, ttl_seconds)
        await self.backend.set(f"cache:{key}", value, expire=ttl_seconds)

    def _remember(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store in the memory tier, keeping it under max_memory_entries"""
        now = datetime.utcnow()
        self._memory_cache.pop(key, None)

        if len(self._memory_cache) >= self.max_memory_entries:
            expired = [k for k, entry in self._memory_cache.items() if entry['expires_at'] <= now]
            for k in expired:
                del self._memory_cache[k]

        # Still full: drop the oldest entries
        while self._memory_cache and len(self._memory_cache) >= self.max_memory_entries:
            del self._memory_cache[next(iter(self._memory_cache))]

        self._memory_cache[key] = {
            'value': value,
            'expires_at': now + timedelta(seconds=ttl_seconds)
        }

    async def delete(self, key: str) -> None:
        """Delete from both tiers"""
        self._memory_cache.pop(key, None)
        await self.backend.delete(f"cache:{key}")

    async def get_or_set(
        self,
        key: str,
        factory: Callable[[], Awaitable[Any]],
        ttl_seconds: int = 300
    ) -> Any:
        """Return the cached value or compute, store and return it"""
        cached = await self.get(key)
        if cached is not None:
            return cached

        value = await factory()
        if value is not None:
            await self.set(key, value, ttl_seconds=ttl_seconds)
        return value

    def get_stats(self) -> dict:
        """Get cache statistics"""
        total_requests = self._cache_stats['hits'] + self._cache_stats['misses']
        hit_rate = self._cache_stats['hits'] / total_requests if total_requests > 0 else 0

        return {
            **self._cache_stats,
            'hit_rate': round(hit_rate, 3),
            'memory_cache_size': len(self._memory_cache)
        }

    async def close(self) -> None:
        self._memory_cache.clear()
        await self.backend.disconnect()


class NullCache:
    """Cache used when no store is configured; never stores anything"""

    enabled = False
    backend_name = "disabled"

    async def get(self, key: str) -> Optional[Any]:
        return None

    async def set(self, key: str, value: Any, ttl_seconds: int = 300) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None

    async def get_or_set(
        self,
        key: str,
        factory: Callable[[], Awaitable[Any]],
        ttl_seconds: int = 300
    ) -> Any:
        return await factory()

    def get_stats(self) -> dict:
        return {'enabled': False}

    async def close(self) -> None:
        return None
