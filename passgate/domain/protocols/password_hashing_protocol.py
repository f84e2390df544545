"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides concrete implementations (bcrypt, argon2,
pbkdf2), selected by name through the HasherRegistry.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapters (BcryptPasswordService, ...)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt, cost factor 12 (default)
        - Argon2PasswordService: argon2id via argon2-cffi
        - Pbkdf2PasswordService: PBKDF2-SHA256 via passlib

    Usage:
        password_hash = hasher.hash_password("SecurePass123!")
        is_valid = hasher.verify_password("SecurePass123!", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Self-describing hash string (algorithm, parameters and salt
            are encoded in it).

        Note:
            - Hash is one-way (cannot be reversed)
            - Same password produces different hashes (random salt)
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise.

        Note:
            - Returns False for malformed hashes (no exceptions)
        """
        ...
