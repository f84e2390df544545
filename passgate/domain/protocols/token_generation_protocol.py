"""Token generation protocol for domain layer.

Opaque tokens (password recovery, session, email confirmation) only need
to be unguessable and unique; their meaning lives in the record that
stores them alongside a purpose and an expiration.
"""

from typing import Protocol


class TokenGenerationProtocol(Protocol):
    """Opaque token generator interface.

    Implementations:
        - UUIDTokenService: random UUID4 in canonical string form

    Usage:
        token = token_service.generate_token()
    """

    def generate_token(self) -> str:
        """Generate a new random token value.

        Returns:
            Non-empty token string from a cryptographically secure source.
        """
        ...
