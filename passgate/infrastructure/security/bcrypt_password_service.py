"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol with the ``bcrypt`` library.

Security:
    - Adaptive cost factor (each +1 doubles computation time)
    - 72-byte input limit: longer passwords are truncated before hashing
      and before verification, so both sides see the same bytes

Performance:
    - Cost 12: ~250ms per hash (default)
    - Cost 4: ~1ms (tests only)
"""

import bcrypt

from passgate.core.constants import (
    BCRYPT_ROUNDS_DEFAULT,
    BCRYPT_ROUNDS_MAX,
    BCRYPT_ROUNDS_MIN,
)

BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        service = BcryptPasswordService(cost_factor=12)
        password_hash = service.hash_password("SecurePass123!")
        service.verify_password("SecurePass123!", password_hash)  # True
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).

        Raises:
            ValueError: If cost factor is outside the supported range.
        """
        if cost_factor < BCRYPT_ROUNDS_MIN:
            msg = f"Cost factor must be at least {BCRYPT_ROUNDS_MIN}"
            raise ValueError(msg)
        if cost_factor > BCRYPT_ROUNDS_MAX:
            msg = f"Cost factor above {BCRYPT_ROUNDS_MAX} is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService(cost_factor=12)
            >>> hash1 = service.hash_password("SecurePass123!")
            >>> hash2 = service.hash_password("SecurePass123!")
            >>> hash1 != hash2  # Different salts
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(self._encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed or non-bcrypt hashes).
        """
        try:
            # bcrypt.checkpw does constant-time comparison
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
