"""
Services layer - Cache invalidation logic

This module contains the invalidators and the control service that
dispatches to them, separated from the API routing layer for better
testability and reuse by the CLI.
"""

from .bulk_invalidator import BulkInvalidator
from .cache_control_service import CacheControlService, OperationRequest
from .entry_invalidator import SingleEntryInvalidator
from .key_deriver import KeyDeriver, derive_key
from .object_cache_invalidator import ObjectCacheInvalidator

__all__ = [
    "KeyDeriver",
    "derive_key",
    "SingleEntryInvalidator",
    "BulkInvalidator",
    "ObjectCacheInvalidator",
    "CacheControlService",
    "OperationRequest",
]
