"""Application services.

Usage:
    from passgate.application.services import (
        CredentialMutationPipeline,
        put_encrypted_password,
        put_token,
        put_token_expiration,
    )
"""

from passgate.application.services.credential_mutation_pipeline import (
    CredentialMutationPipeline,
    hash_password,
    put_encrypted_password,
    put_token,
    put_token_expiration,
)

__all__ = [
    "CredentialMutationPipeline",
    "hash_password",
    "put_encrypted_password",
    "put_token",
    "put_token_expiration",
]
