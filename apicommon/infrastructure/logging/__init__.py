"""Logging adapters.

Exports:
    ConsoleAdapter: structlog adapter writing to stdout
"""

from apicommon.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
