"""Opaque token generation service.

Tokens are random (version 4) UUIDs in canonical 36-character form.
``uuid.uuid4`` draws its 122 random bits from ``os.urandom``, the OS
CSPRNG, so values are unguessable without any extra hashing.
"""

from uuid import uuid4


class UUIDTokenService:
    """Random UUID token generator implementing TokenGenerationProtocol.

    Example:
        >>> token = UUIDTokenService().generate_token()
        >>> len(token)
        36
    """

    def generate_token(self) -> str:
        """Generate a new token value."""
        return str(uuid4())
