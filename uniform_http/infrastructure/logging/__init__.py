"""Logging adapters implementing LoggerProtocol."""

from uniform_http.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
