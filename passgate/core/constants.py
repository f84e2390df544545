"""Centralized constants for internal implementation details.

These are fixed behaviors of the library, NOT environment-specific
configuration. For tunables, use `passgate/core/config.py` instead.

Categories:
- Field naming: confirmation suffix
- Rule thresholds: defaults for the password strength rules
- Message templates: default (untranslated) error templates
- Hashing: cost bounds
"""

# =============================================================================
# Field Naming
# =============================================================================

CONFIRMATION_SUFFIX: str = "_confirmation"
"""Suffix appended to a password field name to get its confirmation field."""


# =============================================================================
# Rule Thresholds
# =============================================================================

DEFAULT_MIN_LENGTH: int = 8
"""Minimum password length."""

DEFAULT_MAX_REPETITIVE: int = 3
"""Run length of one repeated character at which a password is rejected."""

DEFAULT_MAX_CONSECUTIVE: int = 3
"""Run length of ascending code points at which a password is rejected."""


# =============================================================================
# Message Templates
# =============================================================================
# Placeholders use the %{name} form and are substituted from error metadata
# at render time, never at construction time.

MSG_TOO_SHORT: str = "should be at least %{count} character(s)"
MSG_REQUIRED: str = "can't be blank"
MSG_CONFIRMATION: str = "does not match confirmation"
MSG_REPETITIVE: str = "contains more than %{max} repeating characters"
MSG_CONSECUTIVE: str = "contains more than %{max} consecutive characters"
MSG_BLACKLISTED: str = "is too common"


# =============================================================================
# Hashing
# =============================================================================

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

BCRYPT_ROUNDS_MIN: int = 4
"""Lowest bcrypt cost the library accepts (tests only)."""

BCRYPT_ROUNDS_MAX: int = 20
"""Costs above this are impractically slow."""

PBKDF2_ROUNDS_DEFAULT: int = 600_000
"""Default PBKDF2-SHA256 iteration count."""

ARGON2_TIME_COST_DEFAULT: int = 3
"""Default argon2 time cost (iterations)."""

ARGON2_MEMORY_COST_DEFAULT: int = 65536
"""Default argon2 memory cost in KiB (64 MiB)."""

ARGON2_PARALLELISM_DEFAULT: int = 4
"""Default argon2 parallelism (lanes)."""


# =============================================================================
# Time
# =============================================================================

DURATION_UNIT_STEPS: dict[str, int] = {
    "days": 24,
    "hours": 60,
    "minutes": 60,
    "seconds": 1,
}
"""Multiplier that converts one unit into the next smaller unit."""


# =============================================================================
# Logging
# =============================================================================

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Accepted log level names, lowest first."""
