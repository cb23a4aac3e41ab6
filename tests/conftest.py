# tests/conftest.py - pytest shared configuration and fixtures
import os
import sys
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Add the project root to the import path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from wp_cache_control.core.config import CacheControlSettings  # noqa: E402
from wp_cache_control.core.object_cache import InMemoryObjectCache  # noqa: E402
from wp_cache_control.services.cache_control_service import CacheControlService  # noqa: E402

# ========================================
# Cache tree fixtures
# ========================================


@pytest.fixture
def cache_root(tmp_path) -> str:
    """Empty cache root directory"""
    root = tmp_path / "fastcgi"
    root.mkdir()
    return str(root)


@pytest.fixture
def settings(cache_root) -> CacheControlSettings:
    """Settings pointing at the temporary cache root"""
    return CacheControlSettings(cache_root=cache_root, object_cache_enabled=True, token_ttl=600)


@pytest.fixture
def populated_cache(cache_root) -> list[str]:
    """
    Cache tree laid out like nginx levels=1:2 plus one deeper nest

    Returns:
        Paths of every file written
    """
    files = [
        os.path.join(cache_root, "c", "e8", "c04e411e46a667752902e3e2da376e8c"),
        os.path.join(cache_root, "7", "bb", "ddf158b292edfaa14788b3f19a50ebb7"),
        os.path.join(cache_root, "7", "bb", "0123456789abcdef0123456789abcbb7"),
        os.path.join(cache_root, "1", "ee", "188679009b235bfcd10daf7cec16fee1"),
        os.path.join(cache_root, "temp", "1", "2", "3", "partial"),
    ]
    for path in files:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            f.write("KEY: cached response\n")
    return files


@pytest.fixture
def write_cache_file():
    """Factory writing a cache file and its shard directories"""

    def write(path: str, content: str = "cached") -> str:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            f.write(content)
        return path

    return write


# ========================================
# Service fixtures
# ========================================


@pytest.fixture
def object_cache() -> InMemoryObjectCache:
    """Fresh in-memory object cache"""
    return InMemoryObjectCache(default_ttl=60)


@pytest.fixture
def service(settings, object_cache) -> CacheControlService:
    """CacheControlService over the temporary cache root"""
    return CacheControlService(settings, object_cache=object_cache)


# ========================================
# FastAPI TestClient
# ========================================


@pytest.fixture
def test_client(service, settings, monkeypatch) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the service wired to the temporary cache root"""
    from wp_cache_control.api import dependencies, main

    monkeypatch.setenv("API_KEY_REQUIRED", "false")
    monkeypatch.setenv("OPERATION_TOKEN_SECRET", "test-secret")

    main.app.dependency_overrides[dependencies.get_cache_control_service] = lambda: service
    main.app.dependency_overrides[dependencies.get_settings] = lambda: settings

    with TestClient(main.app) as client:
        yield client

    main.app.dependency_overrides.clear()


# ========================================
# pytest configuration
# ========================================


def pytest_configure(config):
    """pytest configuration"""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
