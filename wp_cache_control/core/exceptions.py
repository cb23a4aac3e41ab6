# wp_cache_control/core/exceptions.py - Custom exception hierarchy
from typing import Any


class CacheControlException(Exception):  # noqa: N818
    """Base exception for wp-cache-control"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {"error": self.__class__.__name__, "message": self.message, "details": self.details}


class ValidationError(CacheControlException):  # noqa: N818
    """Input validation errors"""

    pass


class InvalidURLError(ValidationError):  # noqa: N818
    """URL could not be parsed into scheme, host and path"""

    pass


class ConfigurationError(CacheControlException):  # noqa: N818
    """Configuration errors"""

    pass


class CacheError(CacheControlException):  # noqa: N818
    """Cache backend errors"""

    pass


class AuthenticationError(CacheControlException):  # noqa: N818
    """Authentication errors"""

    pass


class AuthorizationError(CacheControlException):  # noqa: N818
    """Operation token missing, forged or expired"""

    pass


# HTTP Status Code mapping
EXCEPTION_STATUS_CODE_MAP = {
    ValidationError: 422,
    InvalidURLError: 422,
    ConfigurationError: 500,
    CacheError: 500,
    AuthenticationError: 401,
    AuthorizationError: 403,
    CacheControlException: 500,  # Default
}


def get_status_code(exception: CacheControlException) -> int:
    """Get HTTP status code for exception"""
    return EXCEPTION_STATUS_CODE_MAP.get(type(exception), 500)
