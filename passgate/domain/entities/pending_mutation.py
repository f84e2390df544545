"""PendingMutation entity.

A PendingMutation is one in-flight update to a record: the record's
current values, the proposed changes, and every validation error found so
far. It is immutable; each transformation returns a new instance, so the
caller's object is never modified.

Lifecycle:
    Proposed -> Validated -> Transformed -> Ready for persistence
    Proposed -> Rejected (one or more FieldErrors)

Invariants:
    - A field that carries an error is never part of ``persistable_changes``,
      and neither is the field its failed confirmation belongs to.
    - A mutation with any error is rejected as a whole (``is_valid`` False).

Example:
    >>> mutation = PendingMutation.build(
    ...     changes={"password": "s3cret!pass", "password_confirmation": "s3cret!pass"},
    ... )
    >>> mutation.get_change("password")
    's3cret!pass'
    >>> mutation.delete_change("password").has_change("password")
    False
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from passgate.core.constants import CONFIRMATION_SUFFIX
from passgate.domain.errors.field_error import FieldError


def confirmation_field(name: str) -> str:
    """Return the companion confirmation field name for ``name``."""
    return f"{name}{CONFIRMATION_SUFFIX}"


@dataclass(frozen=True, kw_only=True)
class PendingMutation:
    """Proposed field changes plus accumulated validation errors.

    Attributes:
        data: Read-only view of the original record's current values.
        changes: Read-only, insertion-ordered proposed values.
        errors: Ordered (field, error) records accumulated by validators.
    """

    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    changes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    errors: tuple[FieldError, ...] = ()

    def __post_init__(self) -> None:
        # Copy so later edits to caller-owned dicts cannot leak in.
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))
        object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def build(
        cls,
        changes: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> "PendingMutation":
        """Create a mutation from proposed changes over an existing record.

        Changes equal to the record's current value are dropped, since they
        would not change anything on persistence.

        Args:
            changes: Proposed field values.
            data: Current field values of the record (empty for new records).

        Returns:
            New PendingMutation with no errors.
        """
        mutation = cls(data=data or {})
        for name, value in (changes or {}).items():
            mutation = mutation.put_change(name, value)
        return mutation

    # =========================================================================
    # Accessors
    # =========================================================================

    def has_change(self, name: str) -> bool:
        """Whether ``name`` is being changed by this mutation."""
        return name in self.changes

    def get_change(self, name: str, default: Any = None) -> Any:
        """Proposed value for ``name``, or ``default`` if it is not changing."""
        return self.changes.get(name, default)

    def get_field(self, name: str, default: Any = None) -> Any:
        """Effective value of ``name``: the proposed value if changing, else current."""
        if name in self.changes:
            return self.changes[name]
        return self.data.get(name, default)

    def errors_for(self, name: str) -> list[FieldError]:
        """All errors recorded against ``name``, in the order they were added."""
        return [error for error in self.errors if error.field == name]

    @property
    def is_valid(self) -> bool:
        """True when no field carries an error."""
        return not self.errors

    @property
    def error_fields(self) -> frozenset[str]:
        """Names of every field with at least one error."""
        return frozenset(error.field for error in self.errors)

    @property
    def persistable_changes(self) -> dict[str, Any]:
        """Changes that may reach persistence.

        Fields with errors are excluded. An error on a confirmation field
        also withholds the field it confirms, so a rejected password never
        appears here even when only its confirmation failed. A rejected
        mutation should not be persisted at all; this is what remains safe
        to show or log.
        """
        failed = set(self.error_fields)
        for name in self.error_fields:
            if name.endswith(CONFIRMATION_SUFFIX):
                failed.add(name.removesuffix(CONFIRMATION_SUFFIX))
        return {name: value for name, value in self.changes.items() if name not in failed}

    # =========================================================================
    # Transformations (each returns a new mutation)
    # =========================================================================

    def put_change(self, name: str, value: Any) -> "PendingMutation":
        """Propose ``value`` for ``name``.

        A value equal to the record's current value removes any pending
        change instead.
        """
        changes = dict(self.changes)
        if name in self.data and self.data[name] == value:
            changes.pop(name, None)
        else:
            changes[name] = value
        return replace(self, changes=changes)

    def delete_change(self, name: str) -> "PendingMutation":
        """Drop the proposed value for ``name`` (no-op if not changing)."""
        if name not in self.changes:
            return self
        changes = dict(self.changes)
        del changes[name]
        return replace(self, changes=changes)

    def add_error(self, error: FieldError) -> "PendingMutation":
        """Record a validation error."""
        return replace(self, errors=(*self.errors, error))
