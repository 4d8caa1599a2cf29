"""Configuration settings for the objects API client and test suite."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from ..infrastructure.http.resilience import RetryPolicy

load_dotenv()


class ApiMode(str, Enum):
    """Where client requests are sent."""

    LIVE = "live"
    MOCK = "mock"  # In-memory emulation, no network


class Settings(BaseSettings):
    """
    Settings loaded from environment variables and an optional ``.env`` file.

    Every value has a default matching the public restful-api.dev service, so
    an empty environment runs the suite against the live API.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Application settings
    app_name: str = Field(default="Objects API Tests", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment (development, ci, production)")

    # Remote API settings
    api_mode: ApiMode = Field(default=ApiMode.LIVE, description="Target backend: live or mock")
    api_base_url: str = Field(default="https://api.restful-api.dev", description="Base origin of the remote API")
    api_collection: str = Field(default="objects", description="Collection path segment")
    api_timeout: float = Field(default=30.0, gt=0, description="Per-exchange timeout in seconds")

    # Retry settings
    retry_max_attempts: int = Field(default=3, ge=1, le=10, description="Total attempts per request")
    retry_initial_delay: float = Field(default=0.25, ge=0, description="Delay before the first retry in seconds")
    retry_backoff_multiplier: float = Field(default=2.0, ge=1, description="Delay multiplier between retries")

    # Logging settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json or text)")
    log_file: str | None = Field(default=None, description="Log file path")
    log_http_payloads: bool = Field(default=True, description="Log request and response bodies")

    # Test harness settings
    test_data_dir: Path | None = Field(default=None, description="Directory holding JSON test fixtures")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = ["development", "dev", "local", "ci", "staging", "production", "prod"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.environment in ("development", "dev", "local")

    def retry_policy(self) -> "RetryPolicy":
        """Build the retry policy described by these settings."""
        from ..infrastructure.http.resilience import RetryPolicy

        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            initial_delay=self.retry_initial_delay,
            backoff_multiplier=self.retry_backoff_multiplier,
        )

    def client_config(self) -> dict:
        """Keyword configuration for ``ObjectsClientConfig``."""
        return {
            "base_url": self.api_base_url,
            "collection": self.api_collection,
            "timeout": self.api_timeout,
            "log_payloads": self.log_http_payloads,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
