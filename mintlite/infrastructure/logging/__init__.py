"""Logging adapters implementing LoggerProtocol."""

from mintlite.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
