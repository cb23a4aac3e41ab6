"""
Key Deriver - Maps a URL onto its FastCGI cache file

The cache writer keys entries with ``$scheme$request_method$host$request_uri``
and stores them under ``fastcgi_cache_path ... levels=1:2``. Only GET
responses are cached, so the method is always ``GET`` here.
"""

import hashlib
from urllib.parse import quote, urlsplit

from ..core.config import CacheControlSettings
from ..core.exceptions import InvalidURLError
from ..domain.value_objects.cache_file_path import CacheFilePath

CACHE_METHOD = "GET"

# Characters a browser leaves as-is in a request URI; "%" keeps encoded input stable
REQUEST_URI_SAFE = "/%:@!$&'()*+,;=-._~"


def derive_key(scheme: str, host: str, path: str) -> str:
    """
    Compute the cache key for a request

    Args:
        scheme: URL scheme (http, https)
        host: Host as nginx $host sees it (no port, IPv6 in brackets)
        path: Percent-encoded request path

    Returns:
        32-character lowercase hex MD5 digest
    """
    raw = f"{scheme}{CACHE_METHOD}{host}{path}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def parse_url(url: str) -> tuple[str, str, str]:
    """
    Split a URL into the parts the cache key is built from

    Args:
        url: Absolute URL

    Returns:
        Tuple of (scheme, host, path)

    Raises:
        InvalidURLError: If the URL cannot be parsed or lacks scheme or host
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError("URL must not be empty", {"url": url})

    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError as e:
        raise InvalidURLError("URL could not be parsed", {"url": url, "reason": str(e)}) from e

    if not parts.scheme or not host:
        raise InvalidURLError("URL must include a scheme and a host", {"url": url})

    # urlsplit drops the brackets nginx keeps in $host
    if ":" in host:
        host = f"[{host}]"

    path = quote(parts.path, safe=REQUEST_URI_SAFE) or "/"
    return parts.scheme.lower(), host, path


class KeyDeriver:
    """Derives cache file locations under the configured cache root"""

    def __init__(self, settings: CacheControlSettings):
        self.cache_root = settings.cache_root

    def derive(self, url: str) -> CacheFilePath:
        """
        Compute the cache file location for url

        Never touches the filesystem.

        Args:
            url: Absolute URL of a cached page

        Returns:
            CacheFilePath of the entry

        Raises:
            InvalidURLError: If the URL is malformed
        """
        scheme, host, path = parse_url(url)
        return CacheFilePath(root=self.cache_root, key=derive_key(scheme, host, path))
