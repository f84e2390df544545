"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from passgate.core.errors import DomainError, ConfigurationError
"""

from passgate.core.errors.configuration_error import ConfigurationError
from passgate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ConfigurationError",
]
