"""Hashing backend registry.

Maps each HashAlgorithm to a ready-to-use PasswordHashingProtocol
implementation. The registry is populated once at startup by
``build_hasher_registry``; backends whose library is not installed are
recorded as unavailable rather than registered, and asking for them later
is a fatal ConfigurationError. There is no fallback to another algorithm.

Usage:
    registry = build_hasher_registry(settings)
    hasher = registry.get(HashAlgorithm.BCRYPT)
    password_hash = hasher.hash_password("SecurePass123!")

    registry.available()  # frozenset({HashAlgorithm.BCRYPT, ...})
"""

import importlib
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from passgate.core.config import Settings
from passgate.core.enums import ErrorCode
from passgate.core.errors import ConfigurationError
from passgate.domain.enums.hash_algorithm import HashAlgorithm
from passgate.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)


@dataclass(frozen=True, kw_only=True)
class HashBackendMetadata:
    """How to load and build one hashing backend.

    Attributes:
        algorithm: Algorithm the backend implements.
        module: Import path of the adapter module.
        class_name: Adapter class inside ``module``.
        distribution: Package to install when the backend is missing.
        options: Builds constructor kwargs from Settings.
    """

    algorithm: HashAlgorithm
    module: str
    class_name: str
    distribution: str
    options: Callable[[Settings], dict[str, Any]]


HASH_BACKENDS: dict[HashAlgorithm, HashBackendMetadata] = {
    HashAlgorithm.BCRYPT: HashBackendMetadata(
        algorithm=HashAlgorithm.BCRYPT,
        module="passgate.infrastructure.security.bcrypt_password_service",
        class_name="BcryptPasswordService",
        distribution="bcrypt",
        options=lambda s: {"cost_factor": s.bcrypt_rounds},
    ),
    HashAlgorithm.ARGON2: HashBackendMetadata(
        algorithm=HashAlgorithm.ARGON2,
        module="passgate.infrastructure.security.argon2_password_service",
        class_name="Argon2PasswordService",
        distribution="argon2-cffi",
        options=lambda s: {
            "time_cost": s.argon2_time_cost,
            "memory_cost": s.argon2_memory_cost,
            "parallelism": s.argon2_parallelism,
        },
    ),
    HashAlgorithm.PBKDF2: HashBackendMetadata(
        algorithm=HashAlgorithm.PBKDF2,
        module="passgate.infrastructure.security.pbkdf2_password_service",
        class_name="Pbkdf2PasswordService",
        distribution="passlib",
        options=lambda s: {"rounds": s.pbkdf2_rounds},
    ),
}


class HasherRegistry:
    """Read-only lookup of installed hashing backends by algorithm name.

    Args:
        hashers: Algorithm to implementation mapping.
        missing: Algorithm to distribution name for backends that could
            not be loaded (used in error messages).
    """

    def __init__(
        self,
        hashers: Mapping[HashAlgorithm, PasswordHashingProtocol],
        missing: Mapping[HashAlgorithm, str] | None = None,
    ) -> None:
        self._hashers = MappingProxyType(dict(hashers))
        self._missing = MappingProxyType(dict(missing or {}))

    def available(self) -> frozenset[HashAlgorithm]:
        """Algorithms that can be used in this process."""
        return frozenset(self._hashers)

    def is_available(self, algorithm: HashAlgorithm | str) -> bool:
        """Whether ``algorithm`` is registered."""
        try:
            return _coerce(algorithm) in self._hashers
        except ConfigurationError:
            return False

    def get(self, algorithm: HashAlgorithm | str) -> PasswordHashingProtocol:
        """Return the implementation for ``algorithm``.

        Args:
            algorithm: HashAlgorithm member or its string value.

        Returns:
            Hashing service for the algorithm.

        Raises:
            ConfigurationError: If the name is unknown or its backend is not
                installed.
        """
        selected = _coerce(algorithm)
        hasher = self._hashers.get(selected)
        if hasher is None:
            distribution = self._missing.get(
                selected, HASH_BACKENDS[selected].distribution
            )
            raise ConfigurationError(
                f"Hash algorithm '{selected.value}' is not available: "
                f"its backend is not installed. Did you forget to install "
                f"'{distribution}'?",
                code=ErrorCode.HASH_BACKEND_UNAVAILABLE,
            )
        return hasher


def _coerce(algorithm: HashAlgorithm | str) -> HashAlgorithm:
    try:
        return HashAlgorithm(algorithm)
    except ValueError:
        supported = ", ".join(a.value for a in HashAlgorithm)
        raise ConfigurationError(
            f"Invalid hash algorithm: {algorithm!r}. Supported: {supported}",
            code=ErrorCode.UNSUPPORTED_HASH_ALGORITHM,
        ) from None


def build_hasher_registry(settings: Settings) -> HasherRegistry:
    """Load every installed backend and register it.

    Args:
        settings: Source of cost parameters.

    Returns:
        HasherRegistry with one entry per importable backend.
    """
    hashers: dict[HashAlgorithm, PasswordHashingProtocol] = {}
    missing: dict[HashAlgorithm, str] = {}

    for algorithm, backend in HASH_BACKENDS.items():
        try:
            module = importlib.import_module(backend.module)
        except ImportError:
            missing[algorithm] = backend.distribution
            continue
        service_class = getattr(module, backend.class_name)
        hashers[algorithm] = service_class(**backend.options(settings))

    return HasherRegistry(hashers, missing)
