"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from api.dependencies import reset_container
from modules.auth.service import TokenService
from modules.movies.service import MovieService
from modules.users.hashing import PasswordHasher
from modules.users.service import IdentityService
from shared.config import get_settings

from tests.fakes import InMemoryMovieStore, InMemoryUserStore


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# bcrypt's minimum cost keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def valid_movie_payload(**overrides) -> dict:
    """A movie payload that satisfies every field constraint."""
    payload = {
        "title": "Movie 1",
        "description": "A long enough description for a movie",
        "releaseDate": "2024-05-01",
        "rating": 5,
        "category": "action",
        "actors": ["Actor 1", "Actor 2"],
        "poster": "https://example.com/poster.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and cached settings around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def movie_store(user_store) -> InMemoryMovieStore:
    return InMemoryMovieStore(users=user_store)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def identity_service(user_store, hasher) -> IdentityService:
    return IdentityService(store=user_store, hasher=hasher)


@pytest.fixture
def token_service(identity_service) -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET, identities=identity_service)


@pytest.fixture
def movie_service(movie_store) -> MovieService:
    return MovieService(store=movie_store)
