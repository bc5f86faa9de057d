"""
Home Lab OpenTelemetry Setup

Optional distributed tracing for cache operations.

When enabled, a TracerProvider with an OTLP gRPC exporter is installed
globally and redis-py is auto-instrumented. The cache client creates its
own spans through the global tracer, so without this setup they are no-ops.
"""

import os
import socket
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.semconv.resource import ResourceAttributes

from ..constants import APP_VERSION
from .config import Settings

logger = structlog.get_logger(__name__)


class TelemetryManager:
    """Owns the tracer provider for the lifetime of the process."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._tracer_provider: Optional[TracerProvider] = None
        self._redis_instrumented = False

    @property
    def enabled(self) -> bool:
        return self._tracer_provider is not None

    def initialize(self) -> bool:
        """
        Install tracing if OTEL_ENABLED is set.

        Returns:
            True if tracing is active after the call
        """
        if not self._settings.OTEL_ENABLED:
            logger.debug("OpenTelemetry disabled by configuration")
            return False

        if self.enabled:
            return True

        try:
            self._tracer_provider = TracerProvider(resource=self._create_resource())
            self._tracer_provider.add_span_processor(
                BatchSpanProcessor(
                    OTLPSpanExporter(
                        endpoint=self._settings.OTEL_EXPORTER_OTLP_ENDPOINT,
                        insecure=True,
                    )
                )
            )
            trace.set_tracer_provider(self._tracer_provider)
        except Exception as e:
            logger.warning(
                "OpenTelemetry initialization failed, continuing without telemetry",
                error=str(e),
            )
            self._tracer_provider = None
            return False

        try:
            RedisInstrumentor().instrument()
            self._redis_instrumented = True
        except Exception as e:
            logger.warning("Failed to instrument Redis", error=str(e))

        logger.info(
            "Distributed tracing initialized",
            endpoint=self._settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            redis_instrumented=self._redis_instrumented,
        )
        return True

    def _create_resource(self) -> Resource:
        return Resource.create(
            {
                ResourceAttributes.SERVICE_NAME: self._settings.OTEL_SERVICE_NAME,
                ResourceAttributes.SERVICE_VERSION: APP_VERSION,
                ResourceAttributes.DEPLOYMENT_ENVIRONMENT: self._settings.ENVIRONMENT,
                ResourceAttributes.HOST_NAME: socket.gethostname(),
                ResourceAttributes.PROCESS_PID: os.getpid(),
            }
        )

    def shutdown(self) -> None:
        """Flush pending spans and release the exporter."""
        if self._redis_instrumented:
            RedisInstrumentor().uninstrument()
            self._redis_instrumented = False

        if self._tracer_provider is not None:
            self._tracer_provider.shutdown()
            self._tracer_provider = None
            logger.info("OpenTelemetry shut down")
