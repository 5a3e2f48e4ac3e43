"""
Tests for the service container wiring.
"""

import pytest
from unittest.mock import MagicMock, patch

from api.dependencies import ServiceContainer, get_container, reset_container
from modules.auth.exceptions import TokenConfigurationError
from modules.auth.service import TokenService
from modules.movies.service import MovieService
from modules.users.service import IdentityService
from shared.config import Settings


@pytest.fixture
def settings():
    return Settings(
        jwt_secret="container-secret",
        jwt_expires_in_seconds=120,
        bcrypt_rounds=12,
        users_table="accounts",
        movies_table="films",
    )


class TestServiceContainer:
    @patch("shared.database.get_supabase_client")
    def test_builds_services(self, mock_client, settings):
        mock_client.return_value = MagicMock()
        container = ServiceContainer(settings)

        assert isinstance(container.identity, IdentityService)
        assert isinstance(container.tokens, TokenService)
        assert isinstance(container.movies, MovieService)
        assert container.tokens.expires_in_seconds == 120
        assert container.password_hasher.rounds == 12
        assert container.user_repository.table == "accounts"
        assert container.movie_repository.table == "films"
        assert container.movie_repository.users_table == "accounts"

    @patch("shared.database.get_supabase_client")
    def test_services_are_cached(self, mock_client, settings):
        container = ServiceContainer(settings)
        assert container.movies is container.movies
        assert container.identity is container.identity

    @patch("shared.database.get_supabase_client")
    def test_reset(self, mock_client, settings):
        container = ServiceContainer(settings)
        first = container.movies
        container.reset()
        assert container.movies is not first

    @patch("shared.database.get_supabase_client")
    def test_token_service_needs_secret(self, mock_client):
        container = ServiceContainer(Settings(jwt_secret=""))
        with pytest.raises(TokenConfigurationError):
            container.tokens


class TestGetContainer:
    def test_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first
