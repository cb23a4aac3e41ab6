"""
Single Entry Invalidator - Removes the cache file of one URL
"""

import os

from ..core.exceptions import InvalidURLError
from ..core.logging_config import get_logger, log_with_context
from ..domain.models.invalidation_result import InvalidationResult, InvalidationStatus
from .key_deriver import KeyDeriver

logger = get_logger(__name__)


class SingleEntryInvalidator:
    """Deletes the cache file a URL maps to"""

    def __init__(self, key_deriver: KeyDeriver):
        self.key_deriver = key_deriver

    def invalidate(self, url: str) -> InvalidationResult:
        """
        Remove the cache entry for url

        Args:
            url: Absolute URL of a cached page

        Returns:
            InvalidationResult; never raises
        """
        try:
            location = self.key_deriver.derive(url)
        except InvalidURLError as e:
            log_with_context(logger, "info", "Rejected cache URL", url=url, reason=e.message)
            return InvalidationResult(InvalidationStatus.INVALID_INPUT, "Invalid URL entered")

        cache_file = location.path
        if not os.path.exists(cache_file):
            return InvalidationResult(
                InvalidationStatus.NOT_FOUND, "Cache file does not exist.", path=cache_file
            )

        try:
            os.unlink(cache_file)
        except FileNotFoundError:
            # Removed by someone else between the check and the unlink
            return InvalidationResult(
                InvalidationStatus.NOT_FOUND, "Cache file does not exist.", path=cache_file
            )
        except OSError as e:
            log_with_context(
                logger, "error", "Failed to remove cache file", cache_file=cache_file, error=str(e)
            )
            return InvalidationResult(
                InvalidationStatus.IO_FAILURE, "Failed to clear cache.", path=cache_file
            )

        return InvalidationResult(
            InvalidationStatus.SUCCESS, "Cache cleared successfully.", path=cache_file
        )
