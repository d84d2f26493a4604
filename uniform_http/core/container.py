"""Composition root for shared dependencies.

Adapter selection happens here and nowhere else. Functions are cached with
``lru_cache`` so every caller shares one instance per process; tests reset
them with ``cache_clear()``.

Usage:
    from uniform_http.core.container import get_logger

    logger = get_logger()
    logger.info("http_client_created", base_url=base_url)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from uniform_http.core.config import get_settings

if TYPE_CHECKING:
    from uniform_http.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    The adapter logs through the host's structlog configuration. Global
    rendering is set up only when ``configure_logging`` is enabled:
    - development: human-readable console
    - testing/ci/production: JSON

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from uniform_http.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    if settings.configure_logging:
        env = (
            settings.environment.value
            if hasattr(settings.environment, "value")
            else str(settings.environment)
        )
        ConsoleAdapter.configure(
            use_json=env != "development", level=settings.log_level
        )
    return ConsoleAdapter()
