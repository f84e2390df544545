"""passgate - credential mutation validation and preparation.

Validates proposed password changes against strength rules, hashes
passwords with a pluggable backend, generates opaque tokens and stamps
token expirations before a record is persisted.
"""

__version__ = "0.1.0"
