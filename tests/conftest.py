"""Shared pytest fixtures.

Provides:
1. A fixed UTC clock for deterministic expiration tests
2. A small injected blacklist (rules stay testable without the packaged list)
3. Hashing backends with minimum cost so integration tests stay fast
4. Deterministic stand-ins for token generation and logging
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from passgate.core.config import get_settings
from passgate.core.container import (
    get_credential_pipeline,
    get_hasher_registry,
    get_logger,
    get_token_service,
)
from passgate.domain.validators.blacklist import Blacklist


class FakeHasher:
    """Reversible stand-in for a hashing backend (unit tests only)."""

    def __init__(self, prefix: str = "fake") -> None:
        self.prefix = prefix
        self.calls: list[str] = []

    def hash_password(self, password: str) -> str:
        self.calls.append(password)
        return f"${self.prefix}${password[::-1]}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"${self.prefix}${password[::-1]}"


class SequentialTokenService:
    """Token generator returning token-1, token-2, ..."""

    def __init__(self) -> None:
        self.issued = 0

    def generate_token(self) -> str:
        self.issued += 1
        return f"token-{self.issued}"


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Rebuild settings and singletons for every test."""
    for factory in (
        get_settings,
        get_logger,
        get_hasher_registry,
        get_token_service,
        get_credential_pipeline,
    ):
        factory.cache_clear()
    yield
    for factory in (
        get_settings,
        get_logger,
        get_hasher_registry,
        get_token_service,
        get_credential_pipeline,
    ):
        factory.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed reference time: 2024-01-01T12:00:00Z."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def small_blacklist() -> Blacklist:
    """Tiny blacklist for rule tests."""
    return Blacklist.from_iterable(["spiderman", "letmein", "password"])


@pytest.fixture
def fake_hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def token_service() -> SequentialTokenService:
    return SequentialTokenService()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def fast_hash_env(monkeypatch):
    """Lowest-cost settings for real hashing backends."""
    monkeypatch.setenv("PASSGATE_ENVIRONMENT", "testing")
    monkeypatch.setenv("PASSGATE_BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("PASSGATE_ARGON2_TIME_COST", "1")
    monkeypatch.setenv("PASSGATE_ARGON2_MEMORY_COST", "8")
    monkeypatch.setenv("PASSGATE_ARGON2_PARALLELISM", "1")
    monkeypatch.setenv("PASSGATE_PBKDF2_ROUNDS", "1000")
    get_settings.cache_clear()
    return get_settings()
