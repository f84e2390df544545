"""Common-password blacklist.

The default list is the 1,000 most common passwords, shipped as package
data (``data/common_passwords.txt``, one entry per line) and loaded once
per process. Lookups are exact and case-sensitive.

Usage:
    blacklist = load_default_blacklist()
    "spiderman" in blacklist  # True

    # Tests and callers with their own policy inject an alternate list
    custom = Blacklist.from_iterable(["acme2024", "letmein"])
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources

DEFAULT_BLACKLIST_RESOURCE = "common_passwords.txt"


@dataclass(frozen=True, slots=True)
class Blacklist:
    """Immutable set of disallowed password values.

    Attributes:
        entries: The disallowed values.
    """

    entries: frozenset[str]

    @classmethod
    def from_iterable(cls, values: Iterable[str]) -> "Blacklist":
        """Build a blacklist from any iterable of strings."""
        return cls(frozenset(values))

    @classmethod
    def from_text(cls, text: str) -> "Blacklist":
        """Parse one entry per line, ignoring blank lines.

        Entries are not stripped of inner whitespace or case-folded.
        """
        return cls(frozenset(line for line in text.splitlines() if line))

    def __contains__(self, value: object) -> bool:
        return value in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


@lru_cache(maxsize=1)
def load_default_blacklist() -> Blacklist:
    """Load the packaged common-password list (cached for the process).

    Returns:
        Blacklist with the 1,000 most common passwords.
    """
    text = (
        resources.files("passgate.domain.validators")
        .joinpath("data", DEFAULT_BLACKLIST_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return Blacklist.from_text(text)
