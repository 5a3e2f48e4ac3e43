"""
Movie service implementation.

Orchestrates create/read/update/delete against the movie store and calls
the authorization policy explicitly before every mutation.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from shared.models import Identity

from .exceptions import MovieAccessDeniedError, MovieNotFoundError
from .interfaces import IMovieService, IMovieStore
from .models import Movie
from .policy import MutationPolicy, can_mutate
from .validation import editable_payload, parse_movie

logger = logging.getLogger(__name__)


class MovieService(IMovieService):
    """
    Movie service backed by an IMovieStore.

    Concurrent updates to the same movie are last-write-wins; the service
    does not hold locks between the load and the write.
    """

    def __init__(self, store: IMovieStore, policy: MutationPolicy = can_mutate):
        self._store = store
        self._policy = policy

    async def create(self, data: Mapping[str, Any], actor: Identity) -> Movie:
        """Validate the input, stamp the owner and persist."""
        movie_input = parse_movie(data)
        now = datetime.now(timezone.utc).isoformat()

        record = movie_input.model_dump(mode="json")
        record.update(
            {
                "owner_id": str(actor.id),
                "created_at": now,
                "updated_at": now,
            }
        )

        movie = self._store.insert(record)
        logger.info(f"User {actor.id} created movie {movie.id}")
        return movie

    async def find_all(self) -> list[Movie]:
        return self._store.find_many()

    async def find_by_owner(self, owner_id: str) -> list[Movie]:
        return self._store.find_many(owner_id=str(owner_id))

    async def get(self, movie_id: str) -> Movie:
        movie = self._store.find_one(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def update(
        self,
        movie_id: str,
        patch: Mapping[str, Any],
        actor: Identity,
    ) -> Movie:
        """Apply only the supplied fields, after authorization and validation."""
        movie = await self.get(movie_id)
        self._authorize(actor, movie, "update")

        changes = editable_payload(patch)
        validated = parse_movie({**movie.editable_fields(), **changes})

        if not changes:
            return movie

        fields = validated.model_dump(mode="json", include=set(changes))
        fields["updated_at"] = datetime.now(timezone.utc).isoformat()

        updated = self._store.update_in_place(movie_id, fields)
        if updated is None:
            # Deleted between the load and the write
            raise MovieNotFoundError(movie_id)

        logger.info(f"User {actor.id} updated movie {movie_id}: {sorted(changes)}")
        return updated

    async def delete(self, movie_id: str, actor: Identity) -> Movie:
        """Remove the movie and return the removed record."""
        movie = await self.get(movie_id)
        self._authorize(actor, movie, "delete")

        removed = self._store.delete_by_id(movie_id)
        if removed is None:
            raise MovieNotFoundError(movie_id)

        logger.info(f"User {actor.id} deleted movie {movie_id}")
        return removed

    def _authorize(self, actor: Identity, movie: Movie, action: str) -> None:
        if not self._policy(actor, movie):
            logger.warning(f"User {actor.id} denied {action} on movie {movie.id}")
            raise MovieAccessDeniedError(movie.id)
