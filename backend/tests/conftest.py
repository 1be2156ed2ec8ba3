"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired against the in-memory directory, with argon2 cost
parameters turned down so hashing stays fast.
"""

from datetime import timedelta

import pytest

from api.dependencies import reset_container
from modules.access.service import GuardPipeline
from modules.auth.passwords import PasswordService
from modules.auth.service import CredentialService
from modules.tokens.service import TokenService
from modules.users.memory import InMemoryIdentityDirectory
from modules.users.service import UserService
from shared.config import Settings, get_settings

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"
TEST_TTL = timedelta(hours=1)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the container and the settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        jwt_expires_in=TEST_TTL,
        argon2_time_cost=1,
        argon2_memory_cost=8,
        argon2_parallelism=1,
    )


@pytest.fixture
def passwords() -> PasswordService:
    return PasswordService(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_JWT_SECRET, TEST_TTL)


@pytest.fixture
def directory() -> InMemoryIdentityDirectory:
    return InMemoryIdentityDirectory()


@pytest.fixture
def credentials(directory, tokens, passwords) -> CredentialService:
    return CredentialService(directory=directory, tokens=tokens, passwords=passwords)


@pytest.fixture
def users(directory) -> UserService:
    return UserService(directory)


@pytest.fixture
def guard(tokens, directory) -> GuardPipeline:
    return GuardPipeline(tokens=tokens, directory=directory)
