"""Dependency factories (composition root).

Application-scoped singletons, built once per process and read-only
afterwards, so they are safe to share across threads:
- Settings (pydantic-settings)
- Logging (structlog console adapter)
- Hasher registry (installed hashing backends)
- Token generation (random UUIDs)
- Common-password blacklist
- CredentialMutationPipeline wired with all of the above

Tests call ``cache_clear()`` on a factory to rebuild it under different
settings.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from passgate.core.config import get_settings

if TYPE_CHECKING:
    from passgate.application.services.credential_mutation_pipeline import (
        CredentialMutationPipeline,
    )
    from passgate.domain.protocols.hasher_registry_protocol import (
        HasherRegistryProtocol,
    )
    from passgate.domain.protocols.logger_protocol import LoggerProtocol
    from passgate.domain.protocols.token_generation_protocol import (
        TokenGenerationProtocol,
    )
    from passgate.domain.validators.blacklist import Blacklist


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from passgate.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_hasher_registry() -> "HasherRegistryProtocol":
    """Get hasher registry singleton (app-scoped).

    Every backend whose library is installed is registered at this point;
    the rest are remembered as missing for error messages.

    Returns:
        Registry implementing HasherRegistryProtocol.
    """
    from passgate.infrastructure.security.hasher_registry import (
        build_hasher_registry,
    )

    registry = build_hasher_registry(get_settings())
    get_logger().debug(
        "hasher_registry_built",
        available=sorted(algorithm.value for algorithm in registry.available()),
    )
    return registry


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get token generation service singleton (app-scoped).

    Returns:
        UUIDTokenService instance.
    """
    from passgate.infrastructure.security.uuid_token_service import UUIDTokenService

    return UUIDTokenService()


def get_blacklist() -> "Blacklist":
    """Get the common-password blacklist (loaded once, cached by its loader).

    Returns:
        Immutable Blacklist.
    """
    from passgate.domain.validators.blacklist import load_default_blacklist

    return load_default_blacklist()


@lru_cache()
def get_credential_pipeline() -> "CredentialMutationPipeline":
    """Get the credential mutation pipeline wired from settings.

    Raises:
        ConfigurationError: If the configured hash algorithm has no
            installed backend. Fails at startup rather than on the first
            password change.

    Returns:
        CredentialMutationPipeline instance.
    """
    from passgate.application.services.credential_mutation_pipeline import (
        CredentialMutationPipeline,
    )

    settings = get_settings()
    registry = get_hasher_registry()
    # Fail fast on a missing backend for the configured algorithm.
    registry.get(settings.hash_algorithm)

    return CredentialMutationPipeline(
        hasher_registry=registry,
        token_service=get_token_service(),
        blacklist=get_blacklist(),
        logger=get_logger(),
        algorithm=settings.hash_algorithm,
        min_length=settings.password_min_length,
        max_repetitive=settings.password_max_repetitive,
        max_consecutive=settings.password_max_consecutive,
    )
