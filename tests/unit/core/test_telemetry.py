"""Unit tests for OpenTelemetry setup and structured logging."""

import logging
from unittest.mock import MagicMock, patch

import structlog

from homelab.core.config import Settings
from homelab.core.logging import configure_logging
from homelab.core.telemetry import TelemetryManager


class TestTelemetryManager:
    """Test TelemetryManager lifecycle."""

    def test_disabled_by_default(self, test_settings):
        manager = TelemetryManager(test_settings)

        with patch("homelab.core.telemetry.trace.set_tracer_provider") as set_provider:
            assert manager.initialize() is False

        set_provider.assert_not_called()
        assert manager.enabled is False
        manager.shutdown()

    def test_enabled_installs_provider_and_instruments_redis(self):
        settings = Settings(
            _env_file=None,
            ENVIRONMENT="test",
            OTEL_ENABLED=True,
            OTEL_EXPORTER_OTLP_ENDPOINT="http://collector.test:4317",
        )
        manager = TelemetryManager(settings)
        instrumentor = MagicMock()

        with patch("homelab.core.telemetry.OTLPSpanExporter") as exporter, patch(
            "homelab.core.telemetry.BatchSpanProcessor"
        ), patch(
            "homelab.core.telemetry.RedisInstrumentor", return_value=instrumentor
        ), patch(
            "homelab.core.telemetry.trace.set_tracer_provider"
        ) as set_provider:
            assert manager.initialize() is True
            assert manager.enabled is True

            exporter.assert_called_once_with(
                endpoint="http://collector.test:4317", insecure=True
            )
            set_provider.assert_called_once()
            instrumentor.instrument.assert_called_once()

            manager.shutdown()

        instrumentor.uninstrument.assert_called_once()
        assert manager.enabled is False

    def test_exporter_failure_leaves_telemetry_disabled(self):
        settings = Settings(_env_file=None, ENVIRONMENT="test", OTEL_ENABLED=True)
        manager = TelemetryManager(settings)

        with patch(
            "homelab.core.telemetry.OTLPSpanExporter",
            side_effect=RuntimeError("grpc unavailable"),
        ), patch("homelab.core.telemetry.trace.set_tracer_provider") as set_provider:
            assert manager.initialize() is False

        set_provider.assert_not_called()
        assert manager.enabled is False


class TestConfigureLogging:
    """Test structured logging configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_sets_root_level_and_configures_structlog(self):
        settings = Settings(
            _env_file=None, ENVIRONMENT="test", LOG_LEVEL="WARNING", LOG_FORMAT="json"
        )

        configure_logging(settings)

        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_format_uses_console_renderer(self):
        settings = Settings(_env_file=None, ENVIRONMENT="test", LOG_FORMAT="console")

        configure_logging(settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_without_format_renders_json(self, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        settings = Settings(_env_file=None, ENVIRONMENT="production")

        configure_logging(settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
