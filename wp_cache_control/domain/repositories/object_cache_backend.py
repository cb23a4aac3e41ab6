"""
ObjectCacheBackend Interface

Abstract interface for the in-memory object cache facility the service can
flush. Implementations can wrap an in-process store, Redis, Memcached, etc.
"""

from abc import ABC, abstractmethod
from typing import Any


class ObjectCacheBackend(ABC):
    """
    Abstract interface for a process-wide key/value object cache.

    Only ``flush`` is needed to invalidate; the remaining primitives let
    the same backend serve as the application's object cache.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Retrieve value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value if found, None otherwise
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """
        Store value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (None = backend default)

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete value from cache.

        Returns:
            True if key existed and was deleted, False otherwise
        """
        pass

    @abstractmethod
    def flush(self) -> bool:
        """
        Remove every entry.

        All-or-nothing by contract: either the whole store is emptied or
        nothing is and False is returned.

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if cache backend is available."""
        pass

    def get_stats(self) -> dict:
        """Get cache statistics (empty when the backend keeps none)."""
        return {}
