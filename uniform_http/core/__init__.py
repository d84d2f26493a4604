"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types and the try_catch wrapper
- Settings and constants
- Enums shared by the transport and the facade

The core module has NO dependencies on other layers.
"""

from uniform_http.core.enums import Environment, TransportErrorCode
from uniform_http.core.result import Failure, Result, Success, try_catch

__all__ = [
    "Environment",
    "Failure",
    "Result",
    "Success",
    "TransportErrorCode",
    "try_catch",
]
