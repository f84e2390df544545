"""Machine-readable error codes.

Field-level validation codes double as the rule identifier attached to
every FieldError, so consumers can branch on them without parsing
messages. Configuration codes accompany fatal ConfigurationError raises.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Password strength rules (recoverable, accumulated per field)
    TOO_SHORT = "too_short"
    CONFIRMATION_MISSING = "confirmation_missing"
    CONFIRMATION_MISMATCH = "confirmation_mismatch"
    REPETITIVE = "repetitive"
    CONSECUTIVE = "consecutive"
    BLACKLISTED = "blacklisted"

    # Configuration errors (fatal)
    UNSUPPORTED_HASH_ALGORITHM = "unsupported_hash_algorithm"
    HASH_BACKEND_UNAVAILABLE = "hash_backend_unavailable"
    INVALID_DURATION_SPEC = "invalid_duration_spec"
