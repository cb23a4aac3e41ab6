# wp_cache_control/core/object_cache.py - In-process object cache
import threading
import time
from typing import Any

from ..domain.repositories.object_cache_backend import ObjectCacheBackend
from .config import CacheControlSettings


class InMemoryObjectCache(ObjectCacheBackend):
    """Thread-safe in-memory object cache with TTL"""

    def __init__(self, default_ttl: int = 3600):
        self.default_ttl = default_ttl
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _is_expired(self, expires_at: float) -> bool:
        return time.time() > expires_at

    def get(self, key: str) -> Any | None:
        """Get value from cache"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None

            value, expires_at = entry
            if self._is_expired(expires_at):
                del self._entries[key]
                self._misses += 1
                return None

            self._hits += 1
            return value

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Set value in cache with TTL"""
        ttl = self.default_ttl if ttl is None else ttl
        with self._lock:
            self._entries[key] = (value, time.time() + ttl)
        return True

    def delete(self, key: str) -> bool:
        """Delete cache entry"""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def flush(self) -> bool:
        """Clear all cache entries"""
        with self._lock:
            self._entries.clear()
        return True

    def is_available(self) -> bool:
        return True

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            now = time.time()
            expired = sum(1 for _, expires_at in self._entries.values() if now > expires_at)
            total = len(self._entries)
            lookups = self._hits + self._misses
            return {
                "total_entries": total,
                "active_entries": total - expired,
                "expired_entries": expired,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / lookups, 3) if lookups else 0,
            }


# Global object cache instance
_object_cache = None


def get_object_cache(settings: CacheControlSettings) -> ObjectCacheBackend | None:
    """
    Get the process-wide object cache facility

    Args:
        settings: Service settings

    Returns:
        Object cache backend, or None when the facility is disabled
    """
    global _object_cache
    if not settings.object_cache_enabled:
        return None
    if _object_cache is None:
        _object_cache = InMemoryObjectCache(default_ttl=settings.object_cache_ttl)
    return _object_cache
