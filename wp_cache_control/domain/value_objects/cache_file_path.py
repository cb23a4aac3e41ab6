"""
CacheFilePath Value Object

Location of one cache entry inside the sharded FastCGI cache tree.
"""

import os
import re
from dataclasses import dataclass

_KEY_PATTERN = re.compile(r"^[0-9a-f]{32}$")


@dataclass(frozen=True)
class CacheFilePath:
    """
    Cache file location value object.

    The layout matches nginx ``fastcgi_cache_path ... levels=1:2``:
    ``root/key[-1:]/key[-3:-1]/key``.
    """

    root: str
    key: str

    def __post_init__(self):
        """Validate key on construction."""
        if not _KEY_PATTERN.match(self.key):
            raise ValueError("Cache key must be 32 lowercase hex characters")

    @property
    def first_level(self) -> str:
        return self.key[-1:]

    @property
    def second_level(self) -> str:
        return self.key[-3:-1]

    @property
    def path(self) -> str:
        """Full filesystem path of the cache file."""
        return os.path.join(self.root, self.first_level, self.second_level, self.key)

    def __str__(self) -> str:
        return self.path
