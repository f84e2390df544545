"""Hasher lookup protocol.

Lets the application layer select a hashing backend by algorithm name
without importing infrastructure. HasherRegistry implements it.
"""

from typing import Protocol

from passgate.domain.enums.hash_algorithm import HashAlgorithm
from passgate.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)


class HasherRegistryProtocol(Protocol):
    """Lookup of installed hashing backends."""

    def available(self) -> frozenset[HashAlgorithm]:
        """Algorithms usable in this process."""
        ...

    def get(self, algorithm: HashAlgorithm | str) -> PasswordHashingProtocol:
        """Return the backend for ``algorithm``.

        Raises:
            ConfigurationError: If the algorithm is unknown or not installed.
        """
        ...
