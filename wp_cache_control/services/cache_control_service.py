"""
Cache Control Service - Entry points of the cache control surface

This service is what the admin API and CLI call, after they have:
- Authenticated the administrator
- Checked the anti-forgery token for the specific operation

It performs no authentication itself. Every call runs synchronously on
the calling thread and returns an InvalidationResult.
"""

from dataclasses import dataclass

from ..core.config import CacheControlSettings
from ..core.logging_config import get_logger, log_with_context
from ..core.object_cache import get_object_cache
from ..domain.models.invalidation_result import InvalidationResult, InvalidationStatus
from ..domain.repositories.object_cache_backend import ObjectCacheBackend
from .bulk_invalidator import BulkInvalidator
from .entry_invalidator import SingleEntryInvalidator
from .key_deriver import KeyDeriver
from .object_cache_invalidator import ObjectCacheInvalidator

logger = get_logger(__name__)


@dataclass(frozen=True)
class OperationRequest:
    """Operation request as received from the admin surface"""

    operation: str
    url: str | None = None


class CacheControlService:
    """Service dispatching cache control operations to the invalidators"""

    def __init__(
        self,
        settings: CacheControlSettings,
        object_cache: ObjectCacheBackend | None = None,
    ):
        """
        Initialize cache control service

        Args:
            settings: Service settings (cache root, feature flags)
            object_cache: Object cache facility, None when absent
        """
        self.settings = settings
        self.key_deriver = KeyDeriver(settings)
        self.entry_invalidator = SingleEntryInvalidator(self.key_deriver)
        self.bulk_invalidator = BulkInvalidator(settings)
        self.object_cache_invalidator = ObjectCacheInvalidator(object_cache)

    @classmethod
    def from_settings(cls, settings: CacheControlSettings) -> "CacheControlService":
        """Build the service with the process-wide object cache"""
        return cls(settings, object_cache=get_object_cache(settings))

    def on_request_clear_one(self, url: str) -> InvalidationResult:
        """Clear the cache entry of one URL"""
        result = self.entry_invalidator.invalidate(url)
        self._log_result("clear_one", result, url=url)
        return result

    def on_request_clear_all(self) -> InvalidationResult:
        """Clear the entire page cache"""
        result = self.bulk_invalidator.invalidate_all()
        self._log_result(
            "clear_all",
            result,
            files_removed=result.files_removed,
            directories_removed=result.directories_removed,
            failures=result.failure_count(),
        )
        return result

    def on_request_clear_object_cache(self) -> InvalidationResult:
        """Flush the object cache"""
        result = self.object_cache_invalidator.invalidate()
        self._log_result("clear_object", result)
        return result

    def handle(self, request: OperationRequest) -> InvalidationResult:
        """
        Dispatch an operation request

        Args:
            request: Operation name and, for clear_one, the URL

        Returns:
            InvalidationResult of the dispatched operation
        """
        if request.operation == "clear_one":
            if not request.url:
                return InvalidationResult(InvalidationStatus.INVALID_INPUT, "Invalid URL entered")
            return self.on_request_clear_one(request.url)
        if request.operation == "clear_all":
            return self.on_request_clear_all()
        if request.operation == "clear_object":
            return self.on_request_clear_object_cache()
        return InvalidationResult(
            InvalidationStatus.INVALID_INPUT, f"Unknown operation: {request.operation}"
        )

    def _log_result(self, operation: str, result: InvalidationResult, **context):
        level = "info" if result.is_success() else "warning"
        log_with_context(
            logger,
            level,
            result.message,
            operation=operation,
            status=result.status.value,
            target=result.path,
            **context,
        )
