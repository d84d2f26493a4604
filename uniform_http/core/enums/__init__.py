"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from uniform_http.core.enums import Environment, TransportErrorCode
"""

from uniform_http.core.enums.environment import Environment
from uniform_http.core.enums.error_code import TransportErrorCode

__all__ = ["Environment", "TransportErrorCode"]
