"""Runtime environment types.

Used by Settings and the container to pick environment-specific behavior
(for example, JSON log rendering in testing/CI).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
