"""Credential mutation pipeline.

Turns a proposed credential change into something safe to persist:

    Proposed -> Validated -> Transformed -> Ready for persistence
    Proposed -> Rejected (every FieldError found, nothing transformed)

Transform steps are also available as plain functions so callers can
compose their own flow:
- ``put_token``: fill a token field with a random value (idempotent)
- ``put_token_expiration``: stamp an expiration from the token's purpose
- ``put_encrypted_password``: hash the password, drop plaintext fields
- ``hash_password``: hash a value with a named algorithm

Hashing is CPU-bound by design (bcrypt ~250ms at cost 12). Callers on an
event loop should run these calls in a worker thread.

Architecture:
- Application layer depends on domain protocols only; concrete backends
  come from the container unless injected
- Recoverable outcomes are Result values; a missing hashing backend is a
  ConfigurationError and aborts the call
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from passgate.core.constants import (
    DEFAULT_MAX_CONSECUTIVE,
    DEFAULT_MAX_REPETITIVE,
    DEFAULT_MIN_LENGTH,
)
from passgate.core.enums import ErrorCode
from passgate.core.errors import ConfigurationError
from passgate.core.result import Failure, Result, Success
from passgate.domain.entities.pending_mutation import (
    PendingMutation,
    confirmation_field,
)
from passgate.domain.enums.hash_algorithm import HashAlgorithm
from passgate.domain.protocols.hasher_registry_protocol import (
    HasherRegistryProtocol,
)
from passgate.domain.protocols.logger_protocol import LoggerProtocol
from passgate.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
)
from passgate.domain.services.expiration_resolver import (
    lookup_duration,
    resolve_expiration,
)
from passgate.domain.validators.blacklist import Blacklist
from passgate.domain.validators.mutation_validators import validate_secure_password


# =============================================================================
# Transform steps
# =============================================================================


def hash_password(
    algorithm: HashAlgorithm | str,
    value: str,
    registry: HasherRegistryProtocol | None = None,
) -> str:
    """Hash ``value`` with the backend registered for ``algorithm``.

    Args:
        algorithm: Algorithm name or enum member.
        value: Plaintext password.
        registry: Backend lookup (default: process-wide registry).

    Returns:
        Hash string.

    Raises:
        ConfigurationError: If the algorithm is unknown or its backend is
            not installed. Never falls back to another algorithm.
    """
    if registry is None:
        from passgate.core.container import get_hasher_registry

        registry = get_hasher_registry()
    return registry.get(algorithm).hash_password(value)


def put_token(
    mutation: PendingMutation,
    field: str,
    token_service: TokenGenerationProtocol | None = None,
) -> PendingMutation:
    """Generate a random token into ``field`` if it has no value yet.

    Both the proposed and the current record value count: a token that
    exists on either side is never replaced.

    Example:
        >>> len(put_token(PendingMutation.build(), "token").get_change("token"))
        36
        >>> existing = PendingMutation.build(data={"token": "existing-value"})
        >>> put_token(existing, "token").get_field("token")
        'existing-value'
    """
    if mutation.get_field(field) is not None:
        return mutation
    if token_service is None:
        from passgate.core.container import get_token_service

        token_service = get_token_service()
    return mutation.put_change(field, token_service.generate_token())


def put_token_expiration(
    mutation: PendingMutation,
    expiration_field: str,
    purpose_field: str,
    config: Mapping[Any, Any],
    now: datetime | None = None,
) -> PendingMutation:
    """Stamp ``expiration_field`` from the proposed purpose's configured duration.

    Args:
        mutation: Mutation carrying a proposed ``purpose_field`` value.
        expiration_field: Field to receive the absolute UTC expiration.
        purpose_field: Field holding the token purpose.
        config: Purpose to DurationSpec or ``(magnitude, unit)`` pair, e.g.
            ``{"recovery": (24, "hours"), "session": (30, "days")}``.
        now: Reference time (default: current UTC time).

    Returns:
        Mutation with the expiration set, or unchanged if the purpose is
        unset or not in ``config``.

    Raises:
        ConfigurationError: If the matching config entry is malformed.
    """
    spec = lookup_duration(config, mutation.get_change(purpose_field))
    if spec is None:
        return mutation
    return mutation.put_change(expiration_field, resolve_expiration(spec, now))


def put_encrypted_password(
    mutation: PendingMutation,
    source: str,
    destination: str,
    algorithm: HashAlgorithm | str = HashAlgorithm.BCRYPT,
    registry: HasherRegistryProtocol | None = None,
) -> PendingMutation:
    """Replace the plaintext ``source`` change with its hash in ``destination``.

    The ``source`` and ``<source>_confirmation`` changes are removed so the
    plaintext never reaches persistence.

    Raises:
        ConfigurationError: If ``algorithm`` cannot be used. No partial
            mutation is produced.
    """
    password = mutation.get_change(source)
    if password is None:
        return mutation
    password_hash = hash_password(algorithm, password, registry)
    return (
        mutation.put_change(destination, password_hash)
        .delete_change(source)
        .delete_change(confirmation_field(source))
    )


# =============================================================================
# Pipeline
# =============================================================================


class CredentialMutationPipeline:
    """Validate-then-transform orchestration for credential mutations.

    Usage:
        pipeline = get_credential_pipeline()

        result = pipeline.prepare_password(mutation)
        match result:
            case Success(value=ready):
                repo.update(user_id, ready.persistable_changes)
            case Failure(error=rejected):
                for error in rejected.errors:
                    print(error.field, error.render())
    """

    def __init__(
        self,
        hasher_registry: HasherRegistryProtocol,
        token_service: TokenGenerationProtocol,
        blacklist: Blacklist,
        logger: LoggerProtocol,
        algorithm: HashAlgorithm | str = HashAlgorithm.BCRYPT,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_repetitive: int = DEFAULT_MAX_REPETITIVE,
        max_consecutive: int = DEFAULT_MAX_CONSECUTIVE,
    ) -> None:
        """Initialize pipeline with dependencies.

        Args:
            hasher_registry: Lookup of installed hashing backends.
            token_service: Random token generator.
            blacklist: Disallowed common passwords.
            logger: Structured logger.
            algorithm: Hashing algorithm for new passwords.
            min_length: Minimum password length.
            max_repetitive: Repeated-character run length that rejects.
            max_consecutive: Ascending-character run length that rejects.
        """
        self._hasher_registry = hasher_registry
        self._token_service = token_service
        self._blacklist = blacklist
        self._logger = logger
        try:
            self._algorithm = HashAlgorithm(algorithm)
        except ValueError:
            raise ConfigurationError(
                f"Invalid hash algorithm: {algorithm!r}",
                code=ErrorCode.UNSUPPORTED_HASH_ALGORITHM,
            ) from None
        self._min_length = min_length
        self._max_repetitive = max_repetitive
        self._max_consecutive = max_consecutive

    @property
    def algorithm(self) -> HashAlgorithm:
        """Algorithm used for new password hashes."""
        return self._algorithm

    def validate_password(
        self, mutation: PendingMutation, field: str = "password"
    ) -> PendingMutation:
        """Run every strength rule on ``field`` with this pipeline's thresholds."""
        return validate_secure_password(
            mutation,
            field,
            self._blacklist,
            min_length=self._min_length,
            max_repetitive=self._max_repetitive,
            max_consecutive=self._max_consecutive,
        )

    def prepare_password(
        self,
        mutation: PendingMutation,
        field: str = "password",
        destination: str = "encrypted_password",
    ) -> Result[PendingMutation, PendingMutation]:
        """Validate the proposed password and, if valid, hash it.

        Args:
            mutation: Mutation possibly proposing a new password.
            field: Plaintext password field.
            destination: Field that receives the hash.

        Returns:
            Success(ready mutation) with the hash set and plaintext fields
            removed, or Failure(rejected mutation) carrying every error.
            A mutation that does not change ``field`` passes through.

        Raises:
            ConfigurationError: If the pipeline's algorithm is unavailable.
        """
        validated = self.validate_password(mutation, field)
        if not validated.is_valid:
            self._logger.info(
                "credential_mutation_rejected",
                field=field,
                error_fields=sorted(validated.error_fields),
                error_codes=[error.code.value for error in validated.errors],
            )
            return Failure(error=validated)

        try:
            ready = put_encrypted_password(
                validated,
                field,
                destination,
                self._algorithm,
                self._hasher_registry,
            )
        except ConfigurationError as e:
            self._logger.critical(
                "password_hashing_misconfigured",
                error=e,
                algorithm=self._algorithm.value,
            )
            raise

        if ready is not validated:
            self._logger.info(
                "password_prepared",
                field=field,
                destination=destination,
                algorithm=self._algorithm.value,
            )
        return Success(value=ready)

    def prepare_token(
        self,
        mutation: PendingMutation,
        config: Mapping[Any, Any],
        token_field: str = "token",
        purpose_field: str = "purpose",
        expiration_field: str = "expires_at",
        now: datetime | None = None,
    ) -> Result[PendingMutation, PendingMutation]:
        """Fill the token value and stamp its expiration.

        Args:
            mutation: Token mutation (typically proposing a purpose).
            config: Purpose to duration mapping for this call.
            token_field: Field receiving the random token.
            purpose_field: Field holding the token purpose.
            expiration_field: Field receiving the expiration timestamp.
            now: Reference time (default: current UTC time).

        Returns:
            Success(ready mutation), or Failure(mutation) unchanged when it
            already carries errors (nothing is generated for it).
        """
        if not mutation.is_valid:
            self._logger.info(
                "token_mutation_rejected",
                error_fields=sorted(mutation.error_fields),
            )
            return Failure(error=mutation)

        ready = put_token(mutation, token_field, self._token_service)
        ready = put_token_expiration(
            ready, expiration_field, purpose_field, config, now
        )
        self._logger.info(
            "token_prepared",
            token_field=token_field,
            purpose=str(ready.get_field(purpose_field)),
            expires=ready.has_change(expiration_field),
        )
        return Success(value=ready)
