"""PBKDF2-SHA256 password hashing service (adapter).

Implements PasswordHashingProtocol with passlib's ``pbkdf2_sha256`` scheme.
"""

from passlib.context import CryptContext

from passgate.core.constants import PBKDF2_ROUNDS_DEFAULT


class Pbkdf2PasswordService:
    """PBKDF2-SHA256 password hashing service.

    Usage:
        service = Pbkdf2PasswordService(rounds=600_000)
        password_hash = service.hash_password("SecurePass123!")  # $pbkdf2-sha256$600000$...
    """

    def __init__(self, rounds: int = PBKDF2_ROUNDS_DEFAULT) -> None:
        """Initialize PBKDF2 password service.

        Args:
            rounds: Iteration count.
        """
        self._context = CryptContext(
            schemes=["pbkdf2_sha256"],
            pbkdf2_sha256__rounds=rounds,
        )

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with PBKDF2-SHA256 and a random salt."""
        return self._context.hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a PBKDF2 hash.

        Returns:
            True on match; False on mismatch or unrecognized hash format.
        """
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            return False
