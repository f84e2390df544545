"""Result types for railway-oriented programming.

Operations that can fail for recoverable reasons return a Result instead
of raising, which keeps the failure path explicit and testable.

Usage:
    result = pipeline.prepare_password(mutation)
    match result:
        case Success(value=ready):
            repository.save(ready.persistable_changes)
        case Failure(error=rejected):
            show_errors(rejected.errors)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
