# wp_cache_control/core/config.py - Configuration management
import copy
import os
from dataclasses import dataclass
from typing import Any

import yaml

from .exceptions import ConfigurationError

CONFIG_FILE = "config.yml"

DEFAULT_CACHE_ROOT = "/var/www/html/wp-content/cache/fastcgi/"


def get_config_path() -> str:
    """Config file path, overridable with CACHE_CONTROL_CONFIG"""
    return os.getenv("CACHE_CONTROL_CONFIG", CONFIG_FILE)


def get_default_config() -> dict[str, Any]:
    """Return default configuration"""
    return {
        "cache": {
            "root": DEFAULT_CACHE_ROOT,
        },
        "object_cache": {
            "enabled": True,
            "default_ttl": 3600,
        },
        "admin": {
            "token_ttl": 43200,
        },
        "api": {
            "base_url": "http://localhost:8080",
        },
        "logging": {
            "level": "INFO",
            "format": "json",
        },
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from config.yml, layered over the defaults"""
    path = path or get_config_path()
    if not os.path.exists(path):
        return get_default_config()

    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid config file: {path}", {"reason": str(e)}) from e

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")

    return _merge(get_default_config(), loaded)


def get_config_value(path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated path (e.g., 'cache.root')"""
    config = get_config()
    keys = path.split(".")
    value = config

    try:
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default


# Global config instance
_config = None


def get_config() -> dict[str, Any]:
    """Get global config instance (cached)"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config():
    """Drop the cached config so the next lookup reloads it"""
    global _config
    _config = None


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CacheControlSettings:
    """
    Settings injected into the invalidators at construction.

    Built once per process from config.yml and environment overrides;
    the invalidators never read configuration on their own.
    """

    cache_root: str = DEFAULT_CACHE_ROOT
    object_cache_enabled: bool = True
    object_cache_ttl: int = 3600
    token_ttl: int = 43200

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "CacheControlSettings":
        """
        Build settings from a config mapping and the environment.

        Args:
            config: Parsed configuration (defaults to the global config)

        Returns:
            CacheControlSettings instance

        Raises:
            ConfigurationError: If the cache root is empty
        """
        config = config if config is not None else get_config()
        cache = config.get("cache", {})
        object_cache = config.get("object_cache", {})
        admin = config.get("admin", {})

        cache_root = os.getenv("CACHE_ROOT") or cache.get("root", DEFAULT_CACHE_ROOT)
        if not cache_root:
            raise ConfigurationError("cache.root must not be empty")

        enabled = _env_flag("OBJECT_CACHE_ENABLED")
        if enabled is None:
            enabled = bool(object_cache.get("enabled", True))

        return cls(
            cache_root=str(cache_root),
            object_cache_enabled=enabled,
            object_cache_ttl=int(object_cache.get("default_ttl", 3600)),
            token_ttl=int(admin.get("token_ttl", 43200)),
        )
