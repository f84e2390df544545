"""Domain services: pure computations that don't belong to one entity.

Usage:
    from passgate.domain.services import resolve_expiration, lookup_duration
"""

from passgate.domain.services.expiration_resolver import (
    lookup_duration,
    resolve_expiration,
)

__all__ = ["lookup_duration", "resolve_expiration"]
