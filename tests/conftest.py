"""
Main pytest configuration for all tests.

Fixtures, configuration, and an in-memory stand-in for redis.Redis used by
the unit tests.
"""

import os
from typing import Any, Dict, List, Optional
from unittest.mock import patch

import pytest
import structlog

# Set test environment variables before importing homelab modules
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from homelab.core.config import Settings
from homelab.infrastructure.cache import CacheClient, CacheEndpoint


class FakeRedisConnection:
    """Single-connection Redis double backed by a dict shared across connections."""

    def __init__(self, factory: "FakeRedisFactory", **kwargs: Any):
        self._factory = factory
        self.kwargs = kwargs
        self.commands: List[tuple] = []
        self.closed = False

    def _check(self) -> None:
        if self.closed:
            raise AssertionError("command issued on a closed connection")
        if self._factory.command_error is not None:
            raise self._factory.command_error

    def set(self, key: str, value: str):
        self._check()
        self.commands.append(("SET", key, value))
        if self._factory.set_result is not True:
            return self._factory.set_result
        self._factory.store[key] = value
        return True

    def get(self, key: str) -> Optional[str]:
        self._check()
        self.commands.append(("GET", key))
        return self._factory.store.get(key)

    def close(self) -> None:
        self.closed = True


class FakeRedisFactory:
    """Replaces the redis.Redis constructor used by the cache client."""

    def __init__(self):
        self.store: Dict[str, str] = {}
        self.connections: List[FakeRedisConnection] = []
        self.connect_error: Optional[Exception] = None
        self.command_error: Optional[Exception] = None
        self.set_result: Any = True
        self.connect_attempts = 0

    def __call__(self, **kwargs: Any) -> FakeRedisConnection:
        self.connect_attempts += 1
        if self.connect_error is not None:
            raise self.connect_error
        connection = FakeRedisConnection(self, **kwargs)
        self.connections.append(connection)
        return connection

    @property
    def commands(self) -> List[tuple]:
        return [command for conn in self.connections for command in conn.commands]


@pytest.fixture
def fake_redis():
    """Patch redis.Redis inside the cache client with an in-memory fake."""
    factory = FakeRedisFactory()
    with patch("homelab.infrastructure.cache.client.Redis", factory):
        yield factory


@pytest.fixture
def cache_endpoint():
    """Endpoint pointing at a host that only exists in tests."""
    return CacheEndpoint.from_url("redis://cache.test:6379/0")


@pytest.fixture
def cache_client(cache_endpoint, fake_redis):
    """CacheClient wired to the in-memory fake."""
    return CacheClient(cache_endpoint)


@pytest.fixture
def test_settings():
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        CACHE_URL="redis://cache.test:6379/0",
        LAB_CACHE_KEY="myLab",
        LOG_LEVEL="DEBUG",
        OTEL_ENABLED=False,
    )


# Test markers and configuration
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def structlog_through_stdlib():
    """Route structlog through stdlib logging so stdout only carries command output."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()
