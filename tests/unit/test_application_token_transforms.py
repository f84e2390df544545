"""Unit tests for the token and password transform steps.

Tests cover:
- put_token generates only when the field has no value on either side
- put_token_expiration stamps expirations from purpose config
- put_encrypted_password swaps plaintext for a hash
- hash_password dispatches through the registry
"""

from datetime import timedelta

import pytest

from passgate.application.services import (
    hash_password,
    put_encrypted_password,
    put_token,
    put_token_expiration,
)
from passgate.core.enums import ErrorCode
from passgate.core.errors import ConfigurationError
from passgate.domain.entities import PendingMutation
from passgate.domain.enums import HashAlgorithm
from passgate.domain.value_objects import DurationSpec
from passgate.infrastructure.security import HasherRegistry
from tests.conftest import FakeHasher

TOKEN_CONFIG = {
    "recovery": (24, "hours"),
    "session": (30, "days"),
    "confirmation": DurationSpec(15, "minutes"),
}


@pytest.mark.unit
class TestPutToken:
    """Test token generation step."""

    def test_generates_token_when_absent(self, token_service):
        mutation = put_token(PendingMutation.build(), "token", token_service)

        assert mutation.get_change("token") == "token-1"

    def test_keeps_proposed_token(self, token_service):
        mutation = PendingMutation.build({"token": "caller-supplied"})

        assert put_token(mutation, "token", token_service) is mutation
        assert token_service.issued == 0

    def test_keeps_existing_record_token(self, token_service):
        """Test a token already persisted on the record is never replaced."""
        mutation = PendingMutation.build(data={"token": "stored"})

        result = put_token(mutation, "token", token_service)

        assert result.get_field("token") == "stored"
        assert not result.has_change("token")

    def test_is_idempotent(self, token_service):
        once = put_token(PendingMutation.build(), "token", token_service)
        twice = put_token(once, "token", token_service)

        assert twice.get_change("token") == "token-1"
        assert token_service.issued == 1

    def test_default_service_issues_uuid(self):
        token = put_token(PendingMutation.build(), "token").get_change("token")

        assert len(token) == 36
        assert token.count("-") == 4

    def test_default_tokens_are_unique(self):
        tokens = {
            put_token(PendingMutation.build(), "token").get_change("token")
            for _ in range(50)
        }

        assert len(tokens) == 50


@pytest.mark.unit
class TestPutTokenExpiration:
    """Test expiration stamping step."""

    def test_recovery_expires_in_one_day(self, fixed_now):
        mutation = PendingMutation.build({"purpose": "recovery"})

        result = put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)

        assert result.get_change("expires_at") == fixed_now + timedelta(seconds=86400)

    def test_session_expires_in_thirty_days(self, fixed_now):
        mutation = PendingMutation.build({"purpose": "session"})

        result = put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)

        assert result.get_change("expires_at") == fixed_now + timedelta(days=30)

    def test_accepts_duration_spec_entries(self, fixed_now):
        mutation = PendingMutation.build({"purpose": "confirmation"})

        result = put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)

        assert result.get_change("expires_at") == fixed_now + timedelta(minutes=15)

    def test_unknown_purpose_is_noop(self, fixed_now):
        mutation = PendingMutation.build({"purpose": "invite"})

        assert (
            put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)
            is mutation
        )

    def test_unhashable_purpose_is_noop(self, fixed_now):
        mutation = PendingMutation.build({"purpose": ["recovery"]})

        assert (
            put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)
            is mutation
        )

    def test_unset_purpose_is_noop(self, fixed_now):
        mutation = PendingMutation.build(data={"purpose": "recovery"})

        result = put_token_expiration(mutation, "expires_at", "purpose", TOKEN_CONFIG, fixed_now)

        assert not result.has_change("expires_at")

    def test_malformed_config_raises(self, fixed_now):
        mutation = PendingMutation.build({"purpose": "recovery"})

        with pytest.raises(ConfigurationError) as exc_info:
            put_token_expiration(
                mutation, "expires_at", "purpose", {"recovery": (1, "fortnights")}, fixed_now
            )

        assert exc_info.value.code == ErrorCode.INVALID_DURATION_SPEC


@pytest.mark.unit
class TestPutEncryptedPassword:
    """Test password hashing step."""

    def test_replaces_plaintext_with_hash(self, fake_hasher):
        registry = HasherRegistry({HashAlgorithm.BCRYPT: fake_hasher})
        mutation = PendingMutation.build(
            {"password": "zx9#kQ!mP2", "password_confirmation": "zx9#kQ!mP2"}
        )

        result = put_encrypted_password(
            mutation, "password", "encrypted_password", registry=registry
        )

        assert result.get_change("encrypted_password") == "$fake$2Pm!Qk#9xz"
        assert not result.has_change("password")
        assert not result.has_change("password_confirmation")
        assert mutation.has_change("password")

    def test_no_password_is_noop(self, fake_hasher):
        registry = HasherRegistry({HashAlgorithm.BCRYPT: fake_hasher})
        mutation = PendingMutation.build({"email": "a@example.com"})

        result = put_encrypted_password(
            mutation, "password", "encrypted_password", registry=registry
        )

        assert result is mutation
        assert fake_hasher.calls == []

    def test_uses_requested_algorithm(self):
        bcrypt_hasher, pbkdf2_hasher = FakeHasher("bcrypt"), FakeHasher("pbkdf2")
        registry = HasherRegistry(
            {HashAlgorithm.BCRYPT: bcrypt_hasher, HashAlgorithm.PBKDF2: pbkdf2_hasher}
        )
        mutation = PendingMutation.build({"password": "secret-value"})

        result = put_encrypted_password(
            mutation, "password", "encrypted_password", "pbkdf2", registry
        )

        assert result.get_change("encrypted_password").startswith("$pbkdf2$")
        assert bcrypt_hasher.calls == []

    def test_unavailable_algorithm_raises(self, fake_hasher):
        """Test a missing backend aborts rather than producing a partial mutation."""
        registry = HasherRegistry(
            {HashAlgorithm.BCRYPT: fake_hasher},
            missing={HashAlgorithm.ARGON2: "argon2-cffi"},
        )
        mutation = PendingMutation.build({"password": "secret-value"})

        with pytest.raises(ConfigurationError) as exc_info:
            put_encrypted_password(mutation, "password", "encrypted_password", "argon2", registry)

        assert exc_info.value.code == ErrorCode.HASH_BACKEND_UNAVAILABLE
        assert fake_hasher.calls == []


@pytest.mark.unit
class TestHashPassword:
    """Test algorithm dispatch."""

    def test_dispatches_to_registered_backend(self, fake_hasher):
        registry = HasherRegistry({HashAlgorithm.BCRYPT: fake_hasher})

        assert hash_password("bcrypt", "abc", registry) == "$fake$cba"

    def test_unknown_algorithm_raises(self, fake_hasher):
        registry = HasherRegistry({HashAlgorithm.BCRYPT: fake_hasher})

        with pytest.raises(ConfigurationError) as exc_info:
            hash_password("sha1", "abc", registry)

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_HASH_ALGORITHM
