"""
Value Objects - Immutable domain values

- CacheFilePath: Sharded location of one FastCGI cache file
"""

from .cache_file_path import CacheFilePath

__all__ = ["CacheFilePath"]
