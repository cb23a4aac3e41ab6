"""
InvalidationResult Domain Model

Outcome of a single invalidation call, consumed by the control surface
to build the user-visible response.
"""

from dataclasses import dataclass, field
from enum import Enum


class InvalidationStatus(str, Enum):
    """Result kinds an invalidator can produce."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    PARTIAL_FAILURE = "partial_failure"
    DISABLED = "disabled"
    INVALID_INPUT = "invalid_input"
    IO_FAILURE = "io_failure"
    FAILURE = "failure"


@dataclass
class InvalidationResult:
    """
    Invalidation result domain model.

    Contains:
    - Status of the operation
    - Human-readable message
    - Target path (single-entry invalidation)
    - Removal counters and failed paths (bulk invalidation)
    """

    status: InvalidationStatus
    message: str
    path: str | None = None
    files_removed: int = 0
    directories_removed: int = 0
    failed_paths: list[str] = field(default_factory=list)

    def is_success(self) -> bool:
        """Check if the operation fully succeeded."""
        return self.status == InvalidationStatus.SUCCESS

    def failure_count(self) -> int:
        """Get number of entries that could not be removed."""
        return len(self.failed_paths)

    def to_dict(self) -> dict:
        """
        Convert to the response shape.

        Detail fields are only included when they carry information.
        """
        data = {"status": self.status.value, "message": self.message}
        if self.path is not None:
            data["path"] = self.path
        if self.files_removed or self.directories_removed or self.failed_paths:
            data["files_removed"] = self.files_removed
            data["directories_removed"] = self.directories_removed
            data["failed_paths"] = list(self.failed_paths)
        return data
