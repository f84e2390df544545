"""Argon2 password hashing service (adapter).

Implements PasswordHashingProtocol with ``argon2-cffi`` (argon2id).

Importing this module fails with ImportError when argon2-cffi is not
installed; the hasher registry relies on that to leave argon2 unregistered.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from passgate.core.constants import (
    ARGON2_MEMORY_COST_DEFAULT,
    ARGON2_PARALLELISM_DEFAULT,
    ARGON2_TIME_COST_DEFAULT,
)


class Argon2PasswordService:
    """Argon2id password hashing service.

    Usage:
        service = Argon2PasswordService()
        password_hash = service.hash_password("SecurePass123!")  # $argon2id$v=19$...
        service.verify_password("SecurePass123!", password_hash)  # True
    """

    def __init__(
        self,
        time_cost: int = ARGON2_TIME_COST_DEFAULT,
        memory_cost: int = ARGON2_MEMORY_COST_DEFAULT,
        parallelism: int = ARGON2_PARALLELISM_DEFAULT,
    ) -> None:
        """Initialize argon2 password service.

        Args:
            time_cost: Number of iterations.
            memory_cost: Memory usage in KiB.
            parallelism: Number of parallel lanes.
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using argon2id.

        Returns:
            PHC-format hash string ($argon2id$v=19$m=...,t=...,p=...$salt$hash).
        """
        return self._hasher.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against an argon2 hash.

        Returns:
            True on match; False on mismatch or malformed hash.
        """
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
