"""
Cache Infrastructure Exceptions

Error taxonomy for the cache client boundary.
Connection failures and command failures are kept apart so callers
can branch on the failure class. Nothing here is retried or swallowed.
"""

from typing import Optional, Any, Dict


class CacheException(Exception):
    """Base exception for cache client errors.

    Carries a stable error code and structured details. The originating
    transport error, when there is one, is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


def _describe_error(details: Dict[str, Any], original_error: Optional[Exception]):
    if original_error:
        details["original_error"] = str(original_error)
        details["original_error_type"] = type(original_error).__name__


class CacheConnectionException(CacheException):
    """Raised when a connection to the cache endpoint cannot be established."""

    def __init__(
        self,
        message: str = "Cache connection failed",
        endpoint: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if endpoint:
            details["endpoint"] = endpoint
        _describe_error(details, original_error)

        super().__init__(
            message=message, error_code="CACHE_CONNECTION_ERROR", details=details
        )
        if original_error:
            self.__cause__ = original_error


class CacheServiceException(CacheException):
    """Raised when a command fails on an established connection."""

    def __init__(
        self,
        message: str = "Cache command failed",
        operation: Optional[str] = None,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "CACHE_SERVICE_ERROR",
    ):
        details: Dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if key is not None:
            details["key"] = key
        _describe_error(details, original_error)

        super().__init__(message=message, error_code=error_code, details=details)
        if original_error:
            self.__cause__ = original_error


class CacheKeyNotFoundException(CacheServiceException):
    """Raised when GET finds no value for the key.

    A subclass of CacheServiceException: callers that do not care about
    misses can handle both the same way.
    """

    def __init__(self, key: str):
        super().__init__(
            message=f"Cache key not found: {key}",
            operation="get",
            key=key,
            error_code="CACHE_KEY_NOT_FOUND",
        )


class CacheConfigurationException(CacheException):
    """Raised when the cache endpoint configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)
        _describe_error(details, original_error)

        super().__init__(
            message=message, error_code="CACHE_CONFIGURATION_ERROR", details=details
        )
        if original_error:
            self.__cause__ = original_error
