"""Mutation-level password validators.

Each validator takes a PendingMutation and returns a new one, with a
FieldError appended when its rule fails. Validators only look at the
PROPOSED value of the field: when the field is not being changed they
return the mutation untouched, so updating unrelated fields never trips a
password rule.

Errors accumulate; nothing here short-circuits. Running
``validate_secure_password`` on a weak password reports every violated
rule in one pass.

Messages are templates (``%{max}``) filled from the error metadata at
render time, and every validator accepts a ``message`` override.
"""

from passgate.core.constants import (
    DEFAULT_MAX_CONSECUTIVE,
    DEFAULT_MAX_REPETITIVE,
    DEFAULT_MIN_LENGTH,
    MSG_CONFIRMATION,
    MSG_REQUIRED,
)
from passgate.core.enums import ErrorCode
from passgate.domain.entities.pending_mutation import (
    PendingMutation,
    confirmation_field,
)
from passgate.domain.errors.field_error import FieldError
from passgate.domain.validators.blacklist import Blacklist
from passgate.domain.validators.registry import (
    PASSWORD_RULES_REGISTRY,
    PasswordRuleMetadata,
)


def _rule_error(
    rule: PasswordRuleMetadata, field: str, message: str | None, **params: int
) -> FieldError:
    return FieldError(
        field=field,
        code=rule.code,
        message=rule.message if message is None else message,
        metadata={"validation": rule.rule_name, **params},
    )


def validate_length(
    mutation: PendingMutation,
    field: str,
    min: int = DEFAULT_MIN_LENGTH,
    message: str | None = None,
) -> PendingMutation:
    """Require the proposed value to have at least ``min`` characters.

    Example:
        >>> m = PendingMutation.build({"password": "a", "password_confirmation": "a"})
        >>> validate_length(m, "password").errors_for("password")[0].render()
        'should be at least 8 character(s)'
    """
    rule = PASSWORD_RULES_REGISTRY[ErrorCode.TOO_SHORT]
    value = mutation.get_change(field)
    if value is None or not rule.violates(value, min):
        return mutation
    return mutation.add_error(_rule_error(rule, field, message, count=min, min=min))


def validate_confirmation(
    mutation: PendingMutation,
    field: str,
    required: bool = False,
    message: str | None = None,
) -> PendingMutation:
    """Require ``<field>_confirmation`` to equal the proposed ``field`` value.

    Errors are recorded on the confirmation field.

    Args:
        mutation: Mutation to check.
        field: Password field name.
        required: When True, a missing or empty confirmation is an error.
        message: Override for the mismatch message.

    Returns:
        Mutation, with a ``confirmation_missing`` or ``confirmation_mismatch``
        error on the confirmation field when the rule fails.
    """
    confirmation = confirmation_field(field)
    value = mutation.get_change(field)
    confirmed = mutation.get_change(confirmation)

    if value is None:
        return mutation

    if confirmed is None or confirmed == "":
        if required:
            return mutation.add_error(
                FieldError(
                    field=confirmation,
                    code=ErrorCode.CONFIRMATION_MISSING,
                    message=MSG_REQUIRED,
                    metadata={"validation": "required"},
                )
            )
        return mutation

    if confirmed != value:
        return mutation.add_error(
            FieldError(
                field=confirmation,
                code=ErrorCode.CONFIRMATION_MISMATCH,
                message=MSG_CONFIRMATION if message is None else message,
                metadata={"validation": "confirmation"},
            )
        )
    return mutation


def validate_nonrepetitive(
    mutation: PendingMutation,
    field: str,
    max: int = DEFAULT_MAX_REPETITIVE,
    message: str | None = None,
) -> PendingMutation:
    """Reject values with ``max`` or more identical characters in a row ("aaa", "111")."""
    rule = PASSWORD_RULES_REGISTRY[ErrorCode.REPETITIVE]
    value = mutation.get_change(field)
    if value is None or not rule.violates(value, max):
        return mutation
    return mutation.add_error(_rule_error(rule, field, message, max=max))


def validate_nonconsecutive(
    mutation: PendingMutation,
    field: str,
    max: int = DEFAULT_MAX_CONSECUTIVE,
    message: str | None = None,
) -> PendingMutation:
    """Reject values with ``max`` or more ascending characters ("abc", "123")."""
    rule = PASSWORD_RULES_REGISTRY[ErrorCode.CONSECUTIVE]
    value = mutation.get_change(field)
    if value is None or not rule.violates(value, max):
        return mutation
    return mutation.add_error(_rule_error(rule, field, message, max=max))


def validate_exclusion(
    mutation: PendingMutation,
    field: str,
    blacklist: Blacklist | None = None,
    message: str | None = None,
) -> PendingMutation:
    """Reject values found in ``blacklist`` (default: 1,000 most common passwords)."""
    rule = PASSWORD_RULES_REGISTRY[ErrorCode.BLACKLISTED]
    value = mutation.get_change(field)
    if value is None or not rule.violates(value, blacklist):
        return mutation
    return mutation.add_error(_rule_error(rule, field, message))


def validate_secure_password(
    mutation: PendingMutation,
    field: str,
    blacklist: Blacklist | None = None,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_repetitive: int = DEFAULT_MAX_REPETITIVE,
    max_consecutive: int = DEFAULT_MAX_CONSECUTIVE,
) -> PendingMutation:
    """Apply every password strength rule to ``field``.

    Order: length, confirmation (required only when ``field`` is being
    changed), non-repetition, non-consecutiveness, blacklist exclusion.
    All failures are accumulated.

    Example:
        >>> m = PendingMutation.build(
        ...     {"password": "passsword", "password_confirmation": "passsword"}
        ... )
        >>> [e.code.value for e in validate_secure_password(m, "password").errors]
        ['repetitive']
    """
    mutation = validate_length(mutation, field, min=min_length)
    mutation = validate_confirmation(
        mutation, field, required=mutation.get_change(field) is not None
    )
    mutation = validate_nonrepetitive(mutation, field, max=max_repetitive)
    mutation = validate_nonconsecutive(mutation, field, max=max_consecutive)
    return validate_exclusion(mutation, field, blacklist)
