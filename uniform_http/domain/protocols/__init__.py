"""Domain protocols (ports).

Structural interfaces the facade depends on; infrastructure provides the
implementations.
"""

from uniform_http.domain.protocols.logger_protocol import LoggerProtocol
from uniform_http.domain.protocols.transport_protocol import TransportProtocol

__all__ = ["LoggerProtocol", "TransportProtocol"]
