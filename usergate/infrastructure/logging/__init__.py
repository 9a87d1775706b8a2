"""Logging adapters implementing LoggerProtocol."""

from usergate.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
