"""Domain enums package.

Usage:
    from passgate.domain.enums import HashAlgorithm, DurationUnit
"""

from passgate.domain.enums.duration_unit import DurationUnit
from passgate.domain.enums.hash_algorithm import HashAlgorithm

__all__ = ["DurationUnit", "HashAlgorithm"]
