"""Field-level validation error.

A FieldError records one violated rule on one field of a pending mutation.
The message is a template (``"contains more than %{max} repeating
characters"``); placeholders are filled from ``metadata`` only when the
error is rendered, so consumers can translate the template first.

Example:
    >>> error = FieldError(
    ...     field="password",
    ...     code=ErrorCode.REPETITIVE,
    ...     message="contains more than %{max} repeating characters",
    ...     metadata={"validation": "nonrepetitive", "max": 3},
    ... )
    >>> error.render()
    'contains more than 3 repeating characters'
"""

import re
from dataclasses import dataclass, field as dataclass_field

from passgate.core.errors import DomainError

_PLACEHOLDER = re.compile(r"%\{(\w+)\}")


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldError(DomainError):
    """Validation failure attached to a single field.

    Attributes:
        field: Name of the field the error belongs to.
        code: Rule identifier (ErrorCode.TOO_SHORT, REPETITIVE, ...).
        message: Message template with %{name} placeholders.
        metadata: Structured context: the validation name and any threshold.
    """

    field: str
    metadata: dict[str, str | int] = dataclass_field(default_factory=dict)

    @property
    def validation(self) -> str | None:
        """Name of the validation that produced this error."""
        value = self.metadata.get("validation")
        return str(value) if value is not None else None

    def render(self, template: str | None = None) -> str:
        """Substitute metadata into the message template.

        Args:
            template: Optional replacement template (e.g. a translation).
                Defaults to the error's own message.

        Returns:
            Message with every known %{name} placeholder replaced. Unknown
            placeholders are left as-is.
        """
        source = self.message if template is None else template

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in self.metadata:
                return str(self.metadata[key])
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, source)

    def __str__(self) -> str:
        return f"{self.field} {self.render()}"
