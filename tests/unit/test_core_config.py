"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from PASSGATE_* environment variables
- Environment detection
- Validation (bcrypt_rounds range, positive thresholds, algorithm names)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passgate.core.config import Settings, get_settings
from passgate.core.enums import Environment
from passgate.domain.enums import HashAlgorithm


@pytest.mark.unit
class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


@pytest.mark.unit
class TestSettingsDefaults:
    """Test default values with an empty environment."""

    def test_defaults(self):
        """Test defaults match the documented policy."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.hash_algorithm == HashAlgorithm.BCRYPT
        assert settings.bcrypt_rounds == 12
        assert settings.pbkdf2_rounds == 600_000
        assert settings.password_min_length == 8
        assert settings.password_max_repetitive == 3
        assert settings.password_max_consecutive == 3
        assert settings.log_level == "INFO"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_bcrypt_rounds_valid(self):
        """Test bcrypt_rounds validation with valid values."""
        with patch.dict(os.environ, {"PASSGATE_BCRYPT_ROUNDS": "10"}, clear=True):
            assert Settings().bcrypt_rounds == 10

    @pytest.mark.parametrize("rounds", ["3", "21"])
    def test_bcrypt_rounds_out_of_range(self, rounds):
        """Test bcrypt_rounds outside 4..20 is rejected."""
        with patch.dict(os.environ, {"PASSGATE_BCRYPT_ROUNDS": rounds}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "bcrypt_rounds must be between 4 and 20" in str(exc_info.value)

    def test_hash_algorithm_from_env(self):
        with patch.dict(os.environ, {"PASSGATE_HASH_ALGORITHM": "argon2"}, clear=True):
            assert Settings().hash_algorithm == HashAlgorithm.ARGON2

    def test_unknown_hash_algorithm_rejected(self):
        """Test a misspelled algorithm fails at load time."""
        with patch.dict(os.environ, {"PASSGATE_HASH_ALGORITHM": "md5"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    @pytest.mark.parametrize(
        "variable",
        [
            "PASSGATE_PASSWORD_MIN_LENGTH",
            "PASSGATE_PASSWORD_MAX_REPETITIVE",
            "PASSGATE_PASSWORD_MAX_CONSECUTIVE",
            "PASSGATE_PBKDF2_ROUNDS",
        ],
    )
    def test_thresholds_must_be_positive(self, variable):
        with patch.dict(os.environ, {variable: "0"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "value must be a positive integer" in str(exc_info.value)

    def test_log_level_is_upper_cased(self):
        with patch.dict(os.environ, {"PASSGATE_LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["verbose", "trace", "", "5"])
    def test_unknown_log_level_rejected(self, level):
        """Test a name the logging module does not define fails validation."""
        with patch.dict(os.environ, {"PASSGATE_LOG_LEVEL": level}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL" in str(
            exc_info.value
        )

    def test_unprefixed_variables_are_ignored(self):
        """Test only PASSGATE_* variables are read."""
        with patch.dict(os.environ, {"BCRYPT_ROUNDS": "5"}, clear=True):
            assert Settings().bcrypt_rounds == 12


@pytest.mark.unit
class TestEnvironmentProperties:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("environment", "development", "testing", "production"),
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, True, False),
            ("production", False, False, True),
        ],
    )
    def test_environment_flags(self, environment, development, testing, production):
        with patch.dict(os.environ, {"PASSGATE_ENVIRONMENT": environment}, clear=True):
            settings = Settings()

        assert settings.is_development is development
        assert settings.is_testing is testing
        assert settings.is_production is production


@pytest.mark.unit
class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_cached_instance(self):
        """Test get_settings() returns the same object until cache_clear()."""
        first = get_settings()

        assert get_settings() is first
        get_settings.cache_clear()
        assert get_settings() is not first
