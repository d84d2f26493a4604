"""Transport error codes (machine-readable).

Attached to every TransportError so callers can tell an HTTP error status
apart from a request that never produced a response.

Categories:
- Status errors: a response arrived with a non-success status
- Connection errors: no response was received
"""

from enum import Enum


class TransportErrorCode(Enum):
    """Machine-readable transport failure codes."""

    # Status errors (response available)
    ERR_BAD_REQUEST = "ERR_BAD_REQUEST"  # 4xx
    ERR_BAD_RESPONSE = "ERR_BAD_RESPONSE"  # 5xx and other non-success statuses

    # Connection errors (no response)
    ERR_NETWORK = "ERR_NETWORK"
    ECONNABORTED = "ECONNABORTED"  # Timed out
    ERR_TOO_MANY_REDIRECTS = "ERR_TOO_MANY_REDIRECTS"
