"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables prefixed with ``PASSGATE_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Process-wide: hashing algorithm and cost parameters are deployment
  decisions, token-purpose durations are NOT (they are passed per call)

Usage:
    from passgate.core.config import get_settings

    settings = get_settings()
    settings.hash_algorithm      # HashAlgorithm.BCRYPT
    settings.bcrypt_rounds       # 12
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passgate.core.constants import (
    ARGON2_MEMORY_COST_DEFAULT,
    ARGON2_PARALLELISM_DEFAULT,
    ARGON2_TIME_COST_DEFAULT,
    BCRYPT_ROUNDS_DEFAULT,
    BCRYPT_ROUNDS_MAX,
    BCRYPT_ROUNDS_MIN,
    DEFAULT_MAX_CONSECUTIVE,
    DEFAULT_MAX_REPETITIVE,
    DEFAULT_MIN_LENGTH,
    LOG_LEVELS,
    PBKDF2_ROUNDS_DEFAULT,
)
from passgate.core.enums import Environment
from passgate.domain.enums.hash_algorithm import HashAlgorithm


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (PASSGATE_*)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Hashing
    hash_algorithm: HashAlgorithm = Field(
        default=HashAlgorithm.BCRYPT,
        description="Password hashing algorithm (bcrypt, argon2, pbkdf2)",
    )
    bcrypt_rounds: int = Field(
        default=BCRYPT_ROUNDS_DEFAULT,
        description="bcrypt cost factor (12 = ~250ms per hash)",
    )
    argon2_time_cost: int = Field(
        default=ARGON2_TIME_COST_DEFAULT,
        description="argon2 time cost (iterations)",
    )
    argon2_memory_cost: int = Field(
        default=ARGON2_MEMORY_COST_DEFAULT,
        description="argon2 memory cost in KiB",
    )
    argon2_parallelism: int = Field(
        default=ARGON2_PARALLELISM_DEFAULT,
        description="argon2 parallelism (lanes)",
    )
    pbkdf2_rounds: int = Field(
        default=PBKDF2_ROUNDS_DEFAULT,
        description="PBKDF2-SHA256 iteration count",
    )

    # Password strength
    password_min_length: int = Field(
        default=DEFAULT_MIN_LENGTH,
        description="Minimum password length",
    )
    password_max_repetitive: int = Field(
        default=DEFAULT_MAX_REPETITIVE,
        description="Repeated-character run length that rejects a password",
    )
    password_max_consecutive: int = Field(
        default=DEFAULT_MAX_CONSECUTIVE,
        description="Ascending-character run length that rejects a password",
    )

    model_config = SettingsConfigDict(
        env_prefix="PASSGATE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within a usable range.

        Args:
            v: Number of bcrypt rounds.

        Returns:
            int: Validated bcrypt rounds.

        Raises:
            ValueError: If rounds are outside the supported range.
        """
        if not BCRYPT_ROUNDS_MIN <= v <= BCRYPT_ROUNDS_MAX:
            raise ValueError(
                f"bcrypt_rounds must be between {BCRYPT_ROUNDS_MIN} and {BCRYPT_ROUNDS_MAX}"
            )
        return v

    @field_validator(
        "password_min_length",
        "password_max_repetitive",
        "password_max_consecutive",
        "pbkdf2_rounds",
        "argon2_time_cost",
        "argon2_parallelism",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject zero or negative thresholds."""
        if v < 1:
            raise ValueError("value must be a positive integer")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-case the log level name and check it is a standard level.

        Raises:
            ValueError: If the name is not DEBUG, INFO, WARNING, ERROR or CRITICAL.
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI, False otherwise.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
