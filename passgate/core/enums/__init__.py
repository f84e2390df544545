"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from passgate.core.enums import ErrorCode, Environment
"""

from passgate.core.enums.environment import Environment
from passgate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
