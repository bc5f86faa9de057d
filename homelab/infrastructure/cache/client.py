"""
Cache Client

Synchronous key-value access to a Redis-protocol cache service.

Every operation opens its own connection, issues exactly one command and
closes the connection before returning, whether the command succeeded or
not. There is no pooling, no retrying and no local caching: a put followed
by a get observes whatever the remote service returns.

Known limitation: no socket timeouts are configured, so a call blocks until
the transport itself gives up.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from redis import Redis
from redis.backoff import NoBackoff
from redis.exceptions import RedisError
from redis.retry import Retry

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from .endpoint import CacheEndpoint
from .exceptions import (
    CacheConnectionException,
    CacheServiceException,
    CacheKeyNotFoundException,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

T = TypeVar("T")


class CacheClient:
    """
    Write and read string values under string keys.

    The client keeps nothing but a reference to its endpoint, so one
    instance can be shared freely between callers.

    Raises from every operation:
        CacheConnectionException: The endpoint could not be reached.
        CacheServiceException: The connected command failed.
    """

    def __init__(self, endpoint: CacheEndpoint):
        self._endpoint = endpoint

    @property
    def endpoint(self) -> CacheEndpoint:
        return self._endpoint

    @contextmanager
    def _connection(self) -> Iterator[Redis]:
        """Open a dedicated connection and close it when the block exits."""
        try:
            client = Redis(
                **self._endpoint.connection_kwargs(),
                decode_responses=True,
                single_connection_client=True,
                retry=Retry(NoBackoff(), 0),
            )
        except (RedisError, OSError) as e:
            logger.error(f"Cache connection to {self._endpoint} failed: {e}")
            raise CacheConnectionException(
                message=f"Cache connection failed: {e}",
                endpoint=str(self._endpoint),
                original_error=e,
            )

        try:
            yield client
        finally:
            client.close()

    def _execute(
        self, operation: str, redis_command: str, key: str, command: Callable[[Redis], T]
    ) -> T:
        with tracer.start_as_current_span(f"cache.{operation}") as span:
            span.set_attribute("cache.operation", operation)
            span.set_attribute("cache.command", redis_command)
            span.set_attribute("cache.key", key)
            span.set_attribute("cache.endpoint", str(self._endpoint))

            with self._connection() as connection:
                try:
                    result = command(connection)
                except RedisError as e:
                    logger.error(
                        f"Cache {redis_command} failed for key {key!r}: {e}",
                        extra={"operation": operation, "key": key},
                    )
                    raise CacheServiceException(
                        message=f"Cache {redis_command} failed: {e}",
                        operation=operation,
                        key=key,
                        original_error=e,
                    )

            span.set_status(Status(StatusCode.OK))
            return result

    def put(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        The key is not validated here; the service decides what it accepts.
        """

        def _set(connection: Redis) -> None:
            if not connection.set(key, value):
                raise CacheServiceException(
                    message=f"Cache SET was not acknowledged for key {key!r}",
                    operation="put",
                    key=key,
                )

        self._execute("put", "SET", key, _set)
        logger.debug(f"Cache written: {key!r}")

    def get(self, key: str) -> str:
        """
        Return the value currently stored under ``key``.

        Raises:
            CacheKeyNotFoundException: Nothing is stored under ``key``.
        """

        def _get(connection: Redis) -> str:
            value = connection.get(key)
            if value is None:
                raise CacheKeyNotFoundException(key)
            return value

        return self._execute("get", "GET", key, _get)
