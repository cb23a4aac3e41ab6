"""
Object Cache Invalidator - Flushes the in-memory object cache
"""

from ..core.logging_config import get_logger, log_with_context
from ..domain.models.invalidation_result import InvalidationResult, InvalidationStatus
from ..domain.repositories.object_cache_backend import ObjectCacheBackend

logger = get_logger(__name__)


class ObjectCacheInvalidator:
    """Flushes the object cache facility, if this environment has one"""

    def __init__(self, backend: ObjectCacheBackend | None):
        self.backend = backend

    def is_enabled(self) -> bool:
        """Check if an object cache is present and usable"""
        return self.backend is not None and self.backend.is_available()

    def invalidate(self) -> InvalidationResult:
        """
        Flush every entry of the object cache

        Returns:
            InvalidationResult; never raises
        """
        if not self.is_enabled():
            return InvalidationResult(InvalidationStatus.DISABLED, "Object cache is not enabled")

        try:
            flushed = self.backend.flush()
        except Exception as e:
            log_with_context(logger, "error", "Object cache flush raised", error=str(e))
            flushed = False

        if not flushed:
            return InvalidationResult(InvalidationStatus.FAILURE, "Failed to clear object cache")

        return InvalidationResult(InvalidationStatus.SUCCESS, "Object cache cleared successfully")
