"""Security adapters: password hashing backends, registry and token generation.

Backend adapters are NOT imported here; ``build_hasher_registry`` loads
them on demand so a missing library only disables its own algorithm.

Usage:
    from passgate.infrastructure.security import (
        HasherRegistry,
        UUIDTokenService,
        build_hasher_registry,
    )
"""

from passgate.infrastructure.security.hasher_registry import (
    HASH_BACKENDS,
    HashBackendMetadata,
    HasherRegistry,
    build_hasher_registry,
)
from passgate.infrastructure.security.uuid_token_service import UUIDTokenService

__all__ = [
    "HASH_BACKENDS",
    "HashBackendMetadata",
    "HasherRegistry",
    "UUIDTokenService",
    "build_hasher_registry",
]
