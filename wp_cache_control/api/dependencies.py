"""Dependency providers for the admin API"""
from functools import lru_cache

from ..core.config import CacheControlSettings
from ..services.cache_control_service import CacheControlService


@lru_cache
def get_settings() -> CacheControlSettings:
    """Settings, built once per process"""
    return CacheControlSettings.from_config()


def get_cache_control_service() -> CacheControlService:
    """Get CacheControlService instance."""
    return CacheControlService.from_settings(get_settings())
