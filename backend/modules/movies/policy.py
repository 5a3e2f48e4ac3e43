"""
Authorization policy for movie mutations.

Reads are public. Update and delete are allowed for the owner of a movie
and for any admin. The policy is a pure function so the service can call
it explicitly before every mutation.
"""

from typing import Any, Callable
from uuid import UUID

from shared.models import Identity
from .models import Movie

MutationPolicy = Callable[[Identity, Movie], bool]


def normalize_id(value: Any) -> str:
    """
    Render an identifier in a canonical textual form.

    UUIDs (as objects or strings in any case/format) become the canonical
    lowercase hyphenated string; anything else is compared as stripped text.
    """
    if isinstance(value, UUID):
        return str(value)
    text = str(value).strip()
    try:
        return str(UUID(text))
    except ValueError:
        return text


def is_owner(actor: Identity, movie: Movie) -> bool:
    return normalize_id(movie.owner_id) == normalize_id(actor.id)


def is_admin(actor: Identity) -> bool:
    return actor.is_admin


def can_mutate(actor: Identity, movie: Movie) -> bool:
    """Whether the actor may update or delete the movie."""
    return is_admin(actor) or is_owner(actor, movie)
