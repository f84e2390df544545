"""Supported password hashing algorithms.

The set is closed: anything else is a configuration error. Whether a given
algorithm is usable in this process depends on which backend libraries are
installed (see HasherRegistry).
"""

from enum import Enum


class HashAlgorithm(str, Enum):
    """Password hashing algorithm selector."""

    BCRYPT = "bcrypt"
    ARGON2 = "argon2"
    PBKDF2 = "pbkdf2"
