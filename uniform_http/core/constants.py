"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `uniform_http/core/config.py` instead.

Categories:
- Status codes: Sentinels and success ranges
- Timeouts: Default timeouts for transport calls
- Content types: Media types used for body encoding/decoding

Example:
    >>> from uniform_http.core.constants import FALLBACK_STATUS_CODE
    >>> status = getattr(error, "status", None) or FALLBACK_STATUS_CODE
"""

# =============================================================================
# Status Codes
# =============================================================================

FALLBACK_STATUS_CODE: int = 500
"""Status reported when a failure carries no interpretable HTTP status."""

SUCCESS_STATUS_RANGE: tuple[int, int] = (200, 299)
"""Inclusive range of statuses the transport resolves (others raise)."""

CLIENT_ERROR_STATUS_RANGE: tuple[int, int] = (400, 499)
"""Inclusive range of statuses reported as ERR_BAD_REQUEST."""


# =============================================================================
# Timeouts and Limits
# =============================================================================

TRANSPORT_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for transport calls in seconds."""

MAX_REDIRECTS_DEFAULT: int = 20
"""Default maximum number of redirects followed per request."""


# =============================================================================
# Content Types
# =============================================================================

JSON_CONTENT_TYPE: str = "application/json"
"""Media type used for encoded request bodies."""

JSON_SUFFIX: str = "+json"
"""Structured syntax suffix for JSON media types (e.g. application/problem+json)."""
