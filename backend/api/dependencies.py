"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each component receives its collaborators through its
constructor; the container is the only place that knows which concrete
classes are used.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ITokenService
    from modules.movies.interfaces import IMovieService, IMovieStore
    from modules.users.hashing import PasswordHasher
    from modules.users.interfaces import ICredentialStore, IIdentityService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._user_repository: "ICredentialStore | None" = None
        self._movie_repository: "IMovieStore | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._identity_service: "IIdentityService | None" = None
        self._token_service: "ITokenService | None" = None
        self._movie_service: "IMovieService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_repository(self) -> "ICredentialStore":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(
                get_supabase_client(), table=self.settings.users_table
            )
        return self._user_repository

    @property
    def movie_repository(self) -> "IMovieStore":
        """Get the movie repository instance."""
        if self._movie_repository is None:
            from modules.movies.repository import MovieRepository
            from shared.database import get_supabase_client
            self._movie_repository = MovieRepository(
                get_supabase_client(),
                table=self.settings.movies_table,
                users_table=self.settings.users_table,
            )
        return self._movie_repository

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.users.hashing import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def identity(self) -> "IIdentityService":
        """Get the identity service instance."""
        if self._identity_service is None:
            from modules.users.service import IdentityService
            self._identity_service = IdentityService(
                store=self.user_repository,
                hasher=self.password_hasher,
            )
        return self._identity_service

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.service import TokenService
            self._token_service = TokenService.from_settings(self.settings, self.identity)
        return self._token_service

    @property
    def movies(self) -> "IMovieService":
        """Get the movie service instance."""
        if self._movie_service is None:
            from modules.movies.service import MovieService
            self._movie_service = MovieService(store=self.movie_repository)
        return self._movie_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._movie_repository = None
        self._password_hasher = None
        self._identity_service = None
        self._token_service = None
        self._movie_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_identity_service() -> "IIdentityService":
    """FastAPI dependency for identity service."""
    return get_container().identity


def get_token_service() -> "ITokenService":
    """FastAPI dependency for token service."""
    return get_container().tokens


def get_movie_service() -> "IMovieService":
    """FastAPI dependency for movie service."""
    return get_container().movies
