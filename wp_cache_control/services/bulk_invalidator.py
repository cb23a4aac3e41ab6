"""
Bulk Invalidator - Empties the whole FastCGI cache tree

Entries are removed child-first so every directory is already empty when
its own removal is attempted. Removal is best-effort: a failing entry is
recorded and the walk continues, so as much of the cache as possible is
cleared even under permission or lock errors.

The cache writer keeps writing while this runs. An entry that vanishes
mid-walk is not an error; files written after their directory was listed
make that directory's removal fail and are reported as a partial failure.
"""

import os

from ..core.config import CacheControlSettings
from ..core.logging_config import get_logger, log_with_context
from ..domain.models.invalidation_result import InvalidationResult, InvalidationStatus

logger = get_logger(__name__)


class _PurgeTally:
    """Counters collected during one purge"""

    def __init__(self):
        self.files_removed = 0
        self.directories_removed = 0
        self.failed_paths: list[str] = []

    def fail(self, path: str, error: OSError):
        self.failed_paths.append(path)
        log_with_context(logger, "warning", "Failed to remove cache entry", entry=path, error=str(error))


class BulkInvalidator:
    """Deletes every file and directory below the cache root"""

    def __init__(self, settings: CacheControlSettings):
        self.cache_root = settings.cache_root

    def invalidate_all(self) -> InvalidationResult:
        """
        Remove everything under the cache root, keeping the root itself

        Returns:
            InvalidationResult; never raises
        """
        if not os.path.isdir(self.cache_root):
            return InvalidationResult(
                InvalidationStatus.NOT_FOUND,
                "Cache directory does not exist.",
                path=self.cache_root,
            )

        tally = _PurgeTally()
        self._purge_contents(self.cache_root, tally)

        status = InvalidationStatus.PARTIAL_FAILURE if tally.failed_paths else InvalidationStatus.SUCCESS
        message = (
            "Failed to clear all cache."
            if tally.failed_paths
            else "All cache cleared successfully."
        )
        return InvalidationResult(
            status,
            message,
            path=self.cache_root,
            files_removed=tally.files_removed,
            directories_removed=tally.directories_removed,
            failed_paths=tally.failed_paths,
        )

    def _purge_contents(self, directory: str, tally: _PurgeTally) -> bool:
        """Remove the children of directory, deepest first; False when it could not be listed"""
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except FileNotFoundError:
            return True
        except OSError as e:
            tally.fail(directory, e)
            return False

        for entry in entries:
            # Classified now, not cached: a concurrent writer may swap the entry
            try:
                is_directory = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_directory = False

            if is_directory:
                # An unlisted directory is already recorded and cannot be empty
                if not self._purge_contents(entry.path, tally):
                    continue
                if self._remove(entry.path, os.rmdir, tally):
                    tally.directories_removed += 1
            elif self._remove(entry.path, os.unlink, tally):
                tally.files_removed += 1

        return True

    def _remove(self, path: str, remover, tally: _PurgeTally) -> bool:
        """Apply remover to path; False when it failed or the entry was already gone"""
        try:
            remover(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            tally.fail(path, e)
            return False
        return True
