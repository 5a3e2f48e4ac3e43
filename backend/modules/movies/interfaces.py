"""
Movies module interfaces.

The API layer depends on IMovieService for all movie operations.
IMovieStore is the persistence contract the service consumes.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from shared.models import Identity
from .models import Movie


@runtime_checkable
class IMovieStore(Protocol):
    """Persistence contract for movie records."""

    def find_one(self, movie_id: str) -> Optional[Movie]:
        ...

    def find_many(self, owner_id: Optional[str] = None) -> list[Movie]:
        """Movies in storage order, each with its owner's email."""
        ...

    def insert(self, data: dict[str, Any]) -> Movie:
        ...

    def update_in_place(self, movie_id: str, fields: dict[str, Any]) -> Optional[Movie]:
        ...

    def delete_by_id(self, movie_id: str) -> Optional[Movie]:
        ...


@runtime_checkable
class IMovieService(Protocol):
    """
    Interface for movie operations.

    Reads are public; create requires an identity; update and delete
    require the identity to own the movie or be an admin.
    """

    async def create(self, data: Mapping[str, Any], actor: Identity) -> Movie:
        """
        Create a movie owned by the actor.

        Raises:
            InvalidInputError: If any field constraint is violated
        """
        ...

    async def find_all(self) -> list[Movie]:
        """List all movies in storage order."""
        ...

    async def find_by_owner(self, owner_id: str) -> list[Movie]:
        """List the movies owned by a user."""
        ...

    async def get(self, movie_id: str) -> Movie:
        """
        Get a movie by ID.

        Raises:
            MovieNotFoundError: If the movie doesn't exist
        """
        ...

    async def update(
        self,
        movie_id: str,
        patch: Mapping[str, Any],
        actor: Identity,
    ) -> Movie:
        """
        Apply a partial update.

        Only the fields present in the patch change. The merged record must
        still satisfy every field constraint. Ownership cannot be changed.

        Raises:
            MovieNotFoundError: If the movie doesn't exist
            MovieAccessDeniedError: If the actor is neither owner nor admin
            InvalidInputError: If the merged record is invalid
        """
        ...

    async def delete(self, movie_id: str, actor: Identity) -> Movie:
        """
        Delete a movie and return its last state.

        Raises:
            MovieNotFoundError: If the movie doesn't exist
            MovieAccessDeniedError: If the actor is neither owner nor admin
        """
        ...
