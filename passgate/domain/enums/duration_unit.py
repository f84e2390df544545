"""Time units accepted in token duration specs."""

from enum import Enum


class DurationUnit(str, Enum):
    """Unit of a DurationSpec magnitude, largest first."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
