"""
Cache Infrastructure Module

Single-shot Redis cache access for inventory snapshots.

This module provides:
- CacheEndpoint: Immutable description of the cache service location
- CacheClient: put/get with one connection per call
- Exception taxonomy separating connection and command failures
"""

from .client import CacheClient
from .endpoint import CacheEndpoint
from .exceptions import (
    CacheException,
    CacheConnectionException,
    CacheServiceException,
    CacheKeyNotFoundException,
    CacheConfigurationException,
)

__all__ = [
    "CacheClient",
    "CacheEndpoint",
    # Exceptions
    "CacheException",
    "CacheConnectionException",
    "CacheServiceException",
    "CacheKeyNotFoundException",
    "CacheConfigurationException",
]
