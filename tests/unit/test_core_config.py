"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (no environment required)
- Loading from environment variables
- Validation (log level, timeout, redirects, fallback status)
- Environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from uniform_http.core.config import Settings, get_settings
from uniform_http.core.constants import (
    FALLBACK_STATUS_CODE,
    MAX_REDIRECTS_DEFAULT,
    TRANSPORT_TIMEOUT_DEFAULT,
)
from uniform_http.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults_without_environment(self):
        """Test Settings loads with no environment variables at all."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.configure_logging is False
        assert settings.http_timeout == TRANSPORT_TIMEOUT_DEFAULT
        assert settings.http_follow_redirects is True
        assert settings.http_max_redirects == MAX_REDIRECTS_DEFAULT
        assert settings.http_verify_ssl is True
        assert settings.http_fallback_status == FALLBACK_STATUS_CODE == 500


class TestSettingsFromEnvironment:
    """Test loading values from environment variables."""

    def test_reads_http_settings(self):
        env_values = {
            "ENVIRONMENT": "ci",
            "HTTP_TIMEOUT": "5.5",
            "HTTP_FOLLOW_REDIRECTS": "false",
            "HTTP_MAX_REDIRECTS": "3",
            "HTTP_VERIFY_SSL": "false",
            "HTTP_FALLBACK_STATUS": "0",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.CI
        assert settings.http_timeout == 5.5
        assert settings.http_follow_redirects is False
        assert settings.http_max_redirects == 3
        assert settings.http_verify_ssl is False
        assert settings.http_fallback_status == 0

    def test_environment_variables_are_case_insensitive(self):
        with patch.dict(os.environ, {"log_level": "debug"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_normalized_to_upper_case(self):
        settings = Settings(_env_file=None, log_level="warning")
        assert settings.log_level == "WARNING"

    def test_log_level_rejects_unknown_names(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, log_level="verbose")

        assert any(
            "log_level must be a standard logging level" in str(error)
            for error in exc_info.value.errors()
        )

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, http_timeout=timeout)

    def test_max_redirects_rejects_negative(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, http_max_redirects=-1)

    @pytest.mark.parametrize("status", [0, 100, 500, 599])
    def test_fallback_status_accepts_valid_values(self, status):
        settings = Settings(_env_file=None, http_fallback_status=status)
        assert settings.http_fallback_status == status

    @pytest.mark.parametrize("status", [-1, 99, 600])
    def test_fallback_status_rejects_invalid_values(self, status):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, http_fallback_status=status)

        assert any(
            "http_fallback_status must be 0 or between 100 and 599" in str(error)
            for error in exc_info.value.errors()
        )


class TestEnvironmentDetection:
    """Test is_* convenience properties."""

    @pytest.mark.parametrize(
        ("environment", "flag"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_exactly_one_flag_is_set(self, environment, flag):
        settings = Settings(_env_file=None, environment=environment)
        flags = {
            name: getattr(settings, name)
            for name in ("is_development", "is_testing", "is_ci", "is_production")
        }

        assert flags.pop(flag) is True
        assert not any(flags.values())


class TestGetSettings:
    """Test cached singleton behavior."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self):
        with patch.dict(os.environ, {"HTTP_TIMEOUT": "12"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().http_timeout == 12.0

        with patch.dict(os.environ, {"HTTP_TIMEOUT": "7"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().http_timeout == 7.0
