"""
Integration tests for the cache control flow

Writes cache files where nginx would, then drives the admin API the way
the admin UI does: ask for a token, then perform the operation.
"""

import hashlib
import os

import pytest

PAGES = [
    ("https", "example.com", "/"),
    ("https", "example.com", "/about/"),
    ("https", "example.com", "/blog/hello-world/"),
    ("http", "example.com", "/about/"),
]


def nginx_cache_path(root, scheme, host, path):
    """Where fastcgi_cache_path levels=1:2 stores $scheme$request_method$host$request_uri"""
    key = hashlib.md5(f"{scheme}GET{host}{path}".encode()).hexdigest()
    return os.path.join(root, key[-1], key[-3:-1], key)


@pytest.fixture
def site_cache(cache_root, write_cache_file):
    return {
        page: write_cache_file(nginx_cache_path(cache_root, *page), "KEY: cached\n")
        for page in PAGES
    }


def operate(client, operation, path, **kwargs):
    token = client.get(f"/admin/cache/token?operation={operation}").json()["token"]
    return client.post(path, headers={"X-Operation-Token": token}, **kwargs)


@pytest.mark.integration
class TestCacheControlFlow:
    """End-to-end invalidation through the admin API"""

    def test_clear_one_page_leaves_the_rest(self, test_client, site_cache):
        response = operate(
            test_client, "clear_one", "/admin/cache/clear", json={"url": "https://example.com/about/"}
        )

        assert response.status_code == 200
        assert not os.path.exists(site_cache[("https", "example.com", "/about/")])
        # Same path over http is a different cache entry
        assert os.path.exists(site_cache[("http", "example.com", "/about/")])
        assert os.path.exists(site_cache[("https", "example.com", "/")])

    def test_clear_one_twice(self, test_client, site_cache):
        body = {"url": "https://example.com/blog/hello-world/"}

        first = operate(test_client, "clear_one", "/admin/cache/clear", json=body)
        second = operate(test_client, "clear_one", "/admin/cache/clear", json=body)

        assert first.json()["status"] == "success"
        assert second.json()["status"] == "not_found"

    def test_clear_all_then_clear_one(self, test_client, cache_root, site_cache):
        cleared = operate(test_client, "clear_all", "/admin/cache/clear-all")
        again = operate(test_client, "clear_all", "/admin/cache/clear-all")
        single = operate(
            test_client, "clear_one", "/admin/cache/clear", json={"url": "https://example.com/"}
        )

        assert cleared.json()["files_removed"] == len(PAGES)
        assert again.json()["status"] == "success"
        assert single.status_code == 404
        assert os.listdir(cache_root) == []

    def test_object_cache_independent_of_page_cache(self, test_client, object_cache, site_cache):
        object_cache.set("alloptions", {"siteurl": "https://example.com"})

        response = operate(test_client, "clear_object", "/admin/cache/object/clear")

        assert response.status_code == 200
        assert object_cache.get("alloptions") is None
        assert all(os.path.exists(path) for path in site_cache.values())
