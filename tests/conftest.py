"""Shared pytest fixtures.

- Cached singletons (settings, logger) and structlog configuration are reset
  around every test so environment patches take effect and nothing leaks
  between tests.
- ``mock_logger`` stands in for LoggerProtocol; ``bind()`` returns itself so
  bound calls can be asserted on the same object.
- ``fake_transport`` / ``transport_factory`` let HttpClient run without
  touching httpx.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from uniform_http.core.config import get_settings
from uniform_http.core.container import get_logger


@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Clear cached settings, logger and structlog config around each test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double whose bind()/with_context() return itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def fake_transport() -> MagicMock:
    """Transport double with awaitable request() and aclose()."""
    transport = MagicMock()
    transport.request = AsyncMock()
    transport.aclose = AsyncMock()
    return transport


@pytest.fixture
def transport_factory(fake_transport: MagicMock) -> MagicMock:
    """Factory returning ``fake_transport`` for any base URL/options."""
    return MagicMock(return_value=fake_transport)
