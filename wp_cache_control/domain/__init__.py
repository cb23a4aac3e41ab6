"""
Domain Layer - Invalidation results and cache locations

This layer contains:
- Domain models: Invalidation outcomes
- Repositories: Abstract interface for the object cache facility
- Value objects: Immutable cache file locations

Independent of FastAPI and of the concrete object cache backend.
"""

from .models.invalidation_result import InvalidationResult, InvalidationStatus
from .repositories.object_cache_backend import ObjectCacheBackend
from .value_objects.cache_file_path import CacheFilePath

__all__ = [
    "InvalidationResult",
    "InvalidationStatus",
    "CacheFilePath",
    "ObjectCacheBackend",
]
