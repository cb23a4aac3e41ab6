"""
Domain Models

- InvalidationResult: Outcome of an invalidation call
"""

from .invalidation_result import InvalidationResult, InvalidationStatus

__all__ = ["InvalidationResult", "InvalidationStatus"]
