"""
Unit tests for SingleEntryInvalidator
"""

import os

import pytest

from wp_cache_control.domain.models.invalidation_result import InvalidationStatus
from wp_cache_control.services.entry_invalidator import SingleEntryInvalidator
from wp_cache_control.services.key_deriver import KeyDeriver

URL = "http://example.com/foo"
KEY = "c04e411e46a667752902e3e2da376e8c"


@pytest.fixture
def invalidator(settings):
    return SingleEntryInvalidator(KeyDeriver(settings))


@pytest.fixture
def cache_file(cache_root):
    return os.path.join(cache_root, "c", "e8", KEY)


class TestSingleEntryInvalidator:
    """Test suite for single URL invalidation"""

    def test_missing_entry_returns_not_found(self, invalidator, cache_file):
        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.NOT_FOUND
        assert result.message == "Cache file does not exist."
        assert result.path == cache_file

    def test_existing_entry_is_removed(self, invalidator, cache_file, write_cache_file):
        write_cache_file(cache_file)

        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.SUCCESS
        assert result.message == "Cache cleared successfully."
        assert not os.path.exists(cache_file)

    def test_second_call_returns_not_found(self, invalidator, cache_file, write_cache_file):
        """Repeated invalidation is not an error"""
        write_cache_file(cache_file)

        invalidator.invalidate(URL)
        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.NOT_FOUND

    def test_only_target_file_is_removed(self, invalidator, cache_file, cache_root, write_cache_file):
        write_cache_file(cache_file)
        neighbour = write_cache_file(os.path.join(cache_root, "c", "e8", "f" * 31 + "c"))

        invalidator.invalidate(URL)

        assert os.path.exists(neighbour)
        assert os.path.isdir(os.path.dirname(cache_file))

    def test_invalid_url_returns_invalid_input(self, invalidator):
        result = invalidator.invalidate("not a url")

        assert result.status == InvalidationStatus.INVALID_INPUT
        assert result.message == "Invalid URL entered"
        assert result.path is None

    def test_unlink_failure_returns_io_failure(self, invalidator, cache_file, write_cache_file, monkeypatch):
        write_cache_file(cache_file)

        def deny(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(os, "unlink", deny)

        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.IO_FAILURE
        assert result.message == "Failed to clear cache."

    def test_file_vanishing_before_unlink_is_not_found(
        self, invalidator, cache_file, write_cache_file, monkeypatch
    ):
        write_cache_file(cache_file)

        def gone(path):
            raise FileNotFoundError(2, "No such file or directory", path)

        monkeypatch.setattr(os, "unlink", gone)

        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.NOT_FOUND

    def test_directory_at_cache_path_is_io_failure(self, invalidator, cache_file):
        os.makedirs(cache_file)

        result = invalidator.invalidate(URL)

        assert result.status == InvalidationStatus.IO_FAILURE
        assert os.path.isdir(cache_file)
