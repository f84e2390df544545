"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from passgate.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol
"""

from passgate.domain.protocols.hasher_registry_protocol import HasherRegistryProtocol
from passgate.domain.protocols.logger_protocol import LoggerProtocol
from passgate.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from passgate.domain.protocols.token_generation_protocol import TokenGenerationProtocol

__all__ = [
    "HasherRegistryProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
]
