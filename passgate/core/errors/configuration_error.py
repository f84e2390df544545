"""Fatal configuration error.

Unlike DomainError, this IS an exception: a missing hashing backend or a
malformed duration config is a deployment problem, not a per-request
condition, so it aborts the current call instead of being accumulated.
"""

from passgate.core.enums import ErrorCode


class ConfigurationError(Exception):
    """Raised when the process is configured with something it cannot honor.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message (names the offending setting).
    """

    def __init__(self, message: str, *, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
