# wp_cache_control/core/auth.py - Admin API key and per-operation token checks
import hashlib
import hmac
import os
import secrets
import time

from fastapi import Header, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from .exceptions import AuthenticationError, ConfigurationError

# API Key header configuration
API_KEY_HEADER = APIKeyHeader(name="X-API-Key", auto_error=False)

OPERATION_TOKEN_HEADER = "X-Operation-Token"

OPERATIONS = ("clear_one", "clear_all", "clear_object")

# Used when OPERATION_TOKEN_SECRET is unset; tokens then die with the process
_process_secret = secrets.token_hex(32)


def _same(given: str, expected: str) -> bool:
    # Headers arrive latin-1 decoded; compare_digest rejects non-ASCII str
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def get_api_key(api_key: str | None = Security(API_KEY_HEADER)) -> str | None:
    """
    Verify the administrator API key from the request header

    Args:
        api_key: API key from X-API-Key header

    Returns:
        API key if valid, None if authentication is disabled

    Raises:
        ConfigurationError: If API key is required but API_KEY is unset
        AuthenticationError: If API key is missing or invalid
    """
    if not is_auth_enabled():
        return None

    expected_key = os.getenv("API_KEY")

    if not expected_key:
        raise ConfigurationError("API_KEY not configured on server")

    if not api_key:
        raise AuthenticationError("API key required")

    if not _same(api_key, expected_key):
        raise AuthenticationError("Invalid API key")

    return api_key


def is_auth_enabled() -> bool:
    """Check if API key authentication is enabled"""
    return os.getenv("API_KEY_REQUIRED", "false").lower() == "true"


def _token_secret() -> bytes:
    return os.getenv("OPERATION_TOKEN_SECRET", _process_secret).encode()


def _sign(operation: str, expires_at: int) -> str:
    message = f"{operation}:{expires_at}".encode()
    return hmac.new(_token_secret(), message, hashlib.sha256).hexdigest()


def issue_operation_token(operation: str, ttl_seconds: int, now: float | None = None) -> tuple[str, int]:
    """
    Issue an anti-forgery token bound to one operation

    Args:
        operation: One of OPERATIONS
        ttl_seconds: Token lifetime
        now: Current time (for tests)

    Returns:
        Tuple of (token, expires_at)
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")

    now = time.time() if now is None else now
    expires_at = int(now) + ttl_seconds
    return f"{expires_at}.{_sign(operation, expires_at)}", expires_at


def verify_operation_token(operation: str, token: str | None, now: float | None = None) -> bool:
    """
    Check that token was issued for operation and has not expired

    Args:
        operation: Operation the request wants to perform
        token: Token from the X-Operation-Token header
        now: Current time (for tests)

    Returns:
        True if the token is valid for this operation
    """
    if not token or operation not in OPERATIONS:
        return False

    expires_raw, _, signature = token.partition(".")
    try:
        expires_at = int(expires_raw)
    except ValueError:
        return False

    now = time.time() if now is None else now
    if expires_at < now:
        return False

    return _same(signature, _sign(operation, expires_at))


def require_operation_token(operation: str):
    """
    Build a dependency that rejects requests without a valid token for operation

    Args:
        operation: Operation the guarded route performs

    Returns:
        FastAPI dependency callable
    """

    def dependency(token: str | None = Header(None, alias=OPERATION_TOKEN_HEADER)) -> str:
        if not verify_operation_token(operation, token):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Security check failed",
            )
        return token

    return dependency
