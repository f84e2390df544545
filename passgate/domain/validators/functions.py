"""Password strength predicates.

Pure functions over a candidate string; each returns True when the value
VIOLATES the rule. They know nothing about mutations or fields, which keeps
them reusable (rule catalog, pydantic validators, ad-hoc checks).

Run-length boundary: a run is a violation as soon as its length reaches
``max``. With the default ``max=3``, ``"aaa"`` and ``"123"`` are rejected
while ``"aa"`` and ``"12"`` pass.
"""

from collections.abc import Container

from passgate.core.constants import (
    DEFAULT_MAX_CONSECUTIVE,
    DEFAULT_MAX_REPETITIVE,
    DEFAULT_MIN_LENGTH,
)


def is_too_short(value: str, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """Whether ``value`` has fewer than ``min_length`` characters.

    Example:
        >>> is_too_short("1234567")
        True
        >>> is_too_short("12345678")
        False
    """
    return len(value) < min_length


def is_repetitive(value: str, max: int = DEFAULT_MAX_REPETITIVE) -> bool:
    """Whether ``value`` repeats one character ``max`` times in a row.

    Single left-to-right pass tracking the current character and its run
    length; stops at the first offending run.

    Example:
        >>> is_repetitive("passsword")
        True
        >>> is_repetitive("aaa", max=4)
        False
    """
    current: str | None = None
    run = 0
    for char in value:
        if char == current:
            run += 1
        else:
            current = char
            run = 1
        if run >= max:
            return True
    return False


def is_consecutive(value: str, max: int = DEFAULT_MAX_CONSECUTIVE) -> bool:
    """Whether ``value`` contains ``max`` characters with ascending code points.

    Each step must increase the code point by exactly one ("abc", "123",
    "XYZ"). Single pass tracking the ascending-run length from the previous
    character.

    Example:
        >>> is_consecutive("testing123")
        True
        >>> is_consecutive("testing12")
        False
    """
    previous: int | None = None
    run = 0
    for char in value:
        code = ord(char)
        if previous is not None and code == previous + 1:
            run += 1
        else:
            run = 1
        previous = code
        if run >= max:
            return True
    return False


def is_blacklisted(value: str, blacklist: Container[str]) -> bool:
    """Whether ``value`` is an exact (case-sensitive) member of ``blacklist``."""
    return value in blacklist
