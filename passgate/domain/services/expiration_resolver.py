"""Token expiration resolution.

A token's purpose ("recovery", "session", ...) selects a DurationSpec from
caller-supplied configuration; the duration is turned into an absolute UTC
timestamp relative to ``now``.

Resolution works in whole seconds: ``now`` is truncated to its unix
timestamp, the normalized duration is added, and the sum is converted back
to an aware UTC datetime. For a fixed ``now`` the result is deterministic.

Example:
    >>> now = datetime(2024, 1, 1, tzinfo=UTC)
    >>> resolve_expiration(DurationSpec(24, DurationUnit.HOURS), now)
    datetime.datetime(2024, 1, 2, 0, 0, tzinfo=datetime.timezone.utc)
"""

from collections.abc import Hashable, Mapping
from datetime import UTC, datetime
from typing import Any

from passgate.domain.value_objects.duration_spec import DurationSpec


def lookup_duration(config: Mapping[Any, Any], purpose: Any) -> DurationSpec | None:
    """Find the DurationSpec configured for ``purpose``.

    Args:
        config: Purpose key to DurationSpec or ``(magnitude, unit)`` pair.
        purpose: Purpose value from the mutation (None when unset).

    Returns:
        Parsed DurationSpec, or None if the purpose is unset or unknown.
        Unhashable purposes (lists, dicts) are unknown.

    Raises:
        ConfigurationError: If the configured entry is malformed.
    """
    if purpose is None or not isinstance(purpose, Hashable):
        return None
    entry = config.get(purpose)
    if entry is None:
        return None
    return DurationSpec.parse(entry)


def resolve_expiration(spec: DurationSpec, now: datetime | None = None) -> datetime:
    """Absolute UTC expiration for a duration starting at ``now``.

    Args:
        spec: Token lifetime.
        now: Reference time (default: current UTC time). Naive datetimes
            are taken to be UTC.

    Returns:
        Aware UTC datetime with second precision.
    """
    reference = now if now is not None else datetime.now(UTC)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=UTC)
    return datetime.fromtimestamp(int(reference.timestamp()) + spec.to_seconds(), UTC)
