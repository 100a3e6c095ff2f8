"""Logging adapters implementing LoggerProtocol."""

from pwdigest.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
