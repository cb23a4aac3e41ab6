"""
Repository Interfaces - Abstract cache backend contracts

- ObjectCacheBackend: Interface for the flushable object cache
"""

from .object_cache_backend import ObjectCacheBackend

__all__ = ["ObjectCacheBackend"]
