"""Domain errors package.

Usage:
    from passgate.domain.errors import FieldError
"""

from passgate.domain.errors.field_error import FieldError

__all__ = ["FieldError"]
