"""Domain value objects package.

Usage:
    from passgate.domain.value_objects import DurationSpec
"""

from passgate.domain.value_objects.duration_spec import DurationSpec

__all__ = ["DurationSpec"]
