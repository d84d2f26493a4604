"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables (or a local .env file). Every field has a default, so the library
works without any configuration.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from uniform_http.core.config import get_settings

    settings = get_settings()
    timeout = settings.http_timeout

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uniform_http.core.constants import (
    FALLBACK_STATUS_CODE,
    MAX_REDIRECTS_DEFAULT,
    TRANSPORT_TIMEOUT_DEFAULT,
)
from uniform_http.core.enums import Environment


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file in the working directory
        3. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    configure_logging: bool = Field(
        default=False,
        description="Let the library configure structlog rendering on stdout. "
        "Leave disabled when the host application configures structlog itself.",
    )

    # Transport defaults
    http_timeout: float = Field(
        default=TRANSPORT_TIMEOUT_DEFAULT,
        description="Default transport timeout in seconds",
    )
    http_follow_redirects: bool = Field(
        default=True,
        description="Follow redirects by default",
    )
    http_max_redirects: int = Field(
        default=MAX_REDIRECTS_DEFAULT,
        description="Maximum redirects followed per request",
    )
    http_verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates",
    )

    # Response mapping
    http_fallback_status: int = Field(
        default=FALLBACK_STATUS_CODE,
        description="Status reported for failures without an HTTP status "
        "(DNS, TLS, connection errors). 0 disambiguates from a real upstream 500.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level

    @field_validator("http_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeout is positive.

        Raises:
            ValueError: If timeout is not greater than zero.
        """
        if v <= 0:
            raise ValueError("http_timeout must be greater than 0")
        return v

    @field_validator("http_max_redirects")
    @classmethod
    def validate_max_redirects(cls, v: int) -> int:
        if v < 0:
            raise ValueError("http_max_redirects must be >= 0")
        return v

    @field_validator("http_fallback_status")
    @classmethod
    def validate_fallback_status(cls, v: int) -> int:
        """
        Validate the fallback sentinel.

        Args:
            v: Status code used for failures without a status.

        Returns:
            int: Validated status code.

        Raises:
            ValueError: If not 0 and not a valid HTTP status (100-599).
        """
        if v != 0 and not 100 <= v <= 599:
            raise ValueError("http_fallback_status must be 0 or between 100 and 599")
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
