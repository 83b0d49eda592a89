"""Logging adapters implementing LoggerProtocol."""

from testapi.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
