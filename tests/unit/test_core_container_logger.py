"""Unit tests for get_logger() container function.

Tests cover:
- Host structlog configuration left untouched by default
- Opt-in rendering setup based on ENVIRONMENT
- Singleton pattern (same instance returned)
- Protocol compliance
"""

from unittest.mock import MagicMock, patch

import pytest
import structlog

from uniform_http.core.container import get_logger
from uniform_http.core.enums import Environment
from uniform_http.domain.protocols.logger_protocol import LoggerProtocol
from uniform_http.infrastructure.logging.console_adapter import ConsoleAdapter


HOST_EVENTS: list[str] = []


def host_processor(logger, method_name, event_dict):
    """Stand-in for a processor configured by the host application."""
    HOST_EVENTS.append(event_dict["event"])
    raise structlog.DropEvent


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    def test_keeps_host_structlog_configuration(self):
        """Default settings never replace the host's processors."""
        HOST_EVENTS.clear()
        structlog.configure(processors=[host_processor])

        get_logger().info("http_client_created")

        assert structlog.get_config()["processors"] == [host_processor]
        assert HOST_EVENTS == ["http_client_created"]

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_configures_rendering_when_enabled(self, environment, use_json):
        """Human-readable only in development, JSON everywhere else."""
        with patch("uniform_http.core.container.get_settings") as mock_get_settings:
            mock_get_settings.return_value.environment = environment
            mock_get_settings.return_value.log_level = "DEBUG"
            mock_get_settings.return_value.configure_logging = True

            with patch(
                "uniform_http.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_adapter = MagicMock()
                mock_console.return_value = mock_adapter

                logger = get_logger()

        mock_console.configure.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger == mock_adapter

    def test_skips_configuration_when_disabled(self):
        with patch("uniform_http.core.container.get_settings") as mock_get_settings:
            mock_get_settings.return_value.environment = Environment.PRODUCTION
            mock_get_settings.return_value.configure_logging = False

            with patch(
                "uniform_http.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

        mock_console.configure.assert_not_called()
        mock_console.assert_called_once_with()

    def test_returns_singleton(self):
        assert get_logger() is get_logger()

    def test_returns_protocol_compliant_adapter(self):
        logger: LoggerProtocol = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        for method in ("debug", "info", "warning", "error", "critical", "bind"):
            assert callable(getattr(logger, method))
