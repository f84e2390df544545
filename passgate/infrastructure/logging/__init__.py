"""Logging adapters.

Usage:
    from passgate.infrastructure.logging import ConsoleAdapter
"""

from passgate.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
