"""
Home Lab Inventory Configuration

Configuration management with environment variable support.
Values are read from the process environment and an optional .env file.
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    APP_NAME,
    DEFAULT_CACHE_URL,
    DEFAULT_LAB_CACHE_KEY,
    DEFAULT_LAB_NAME,
)

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation and sensible defaults."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # Environment settings
    ENVIRONMENT: str = Field(
        default="development", description="Application environment"
    )

    # Cache configuration
    CACHE_URL: str = Field(
        default=DEFAULT_CACHE_URL,
        description="Redis connection URL, e.g. redis://host:6379/0",
    )
    LAB_CACHE_KEY: str = Field(
        default=DEFAULT_LAB_CACHE_KEY,
        min_length=1,
        description="Key the lab snapshot is stored under",
    )

    # Inventory
    LAB_NAME: str = Field(default=DEFAULT_LAB_NAME, description="Sample lab name")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="console", description="console or json")

    # OpenTelemetry configuration
    OTEL_ENABLED: bool = Field(default=False, description="Export traces via OTLP")
    OTEL_SERVICE_NAME: str = Field(
        default=APP_NAME, description="OpenTelemetry service name"
    )
    OTEL_EXPORTER_OTLP_ENDPOINT: str = Field(
        default="http://localhost:4317", description="OpenTelemetry OTLP endpoint"
    )

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v

    @field_validator("CACHE_URL")
    @classmethod
    def validate_cache_url(cls, v):
        """Validate cache URL scheme."""
        if not v.startswith(("redis://", "rediss://")):
            raise ValueError("CACHE_URL must be a redis:// or rediss:// URL")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format."""
        allowed = ["console", "json"]
        if v.lower() not in allowed:
            raise ValueError(f"LOG_FORMAT must be one of: {allowed}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def use_json_logs(self) -> bool:
        """JSON logs when asked for, or in production unless LOG_FORMAT is set."""
        if "LOG_FORMAT" in self.model_fields_set:
            return self.LOG_FORMAT == "json"
        return self.is_production


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
