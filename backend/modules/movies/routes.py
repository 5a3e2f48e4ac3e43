"""
Movie API endpoints.

Reads are public. Create, update and delete require a bearer token.
Bodies are passed through as plain JSON objects; validation and the
ownership check both happen in the service.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_movie_service
from api.middleware.auth import get_current_user
from api.models.errors import ERROR_RESPONSES
from shared.models import Identity

from .interfaces import IMovieService
from .models import Movie

router = APIRouter(responses=ERROR_RESPONSES)


@router.get("", response_model=list[Movie])
async def list_movies(
    service: IMovieService = Depends(get_movie_service),
) -> list[Movie]:
    """List all movies."""
    return await service.find_all()


@router.get("/user/{owner_id}", response_model=list[Movie])
async def list_movies_by_owner(
    owner_id: str,
    service: IMovieService = Depends(get_movie_service),
) -> list[Movie]:
    """List the movies created by a user."""
    return await service.find_by_owner(owner_id)


@router.get("/{movie_id}", response_model=Movie)
async def get_movie(
    movie_id: str,
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """Get a single movie."""
    return await service.get(movie_id)


@router.post("", response_model=Movie, status_code=201)
async def create_movie(
    body: dict[str, Any] = Body(...),
    user: Identity = Depends(get_current_user),
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """
    Create a movie owned by the caller.

    Fields follow MovieInput; any ownerId in the body is ignored.
    """
    return await service.create(body, user)


@router.put("/{movie_id}", response_model=Movie)
@router.patch("/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    body: dict[str, Any] = Body(...),
    user: Identity = Depends(get_current_user),
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """
    Update a movie.

    Both PUT and PATCH apply partial-update semantics: fields missing
    from the body are left unchanged. The service checks existence and
    ownership before it validates the patch.
    """
    return await service.update(movie_id, body, user)


@router.delete("/{movie_id}", response_model=Movie)
async def delete_movie(
    movie_id: str,
    user: Identity = Depends(get_current_user),
    service: IMovieService = Depends(get_movie_service),
) -> Movie:
    """Delete a movie and return the deleted record."""
    return await service.delete(movie_id, user)
