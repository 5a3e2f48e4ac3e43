"""
User-related endpoints.

Provides endpoints for the current user's profile.
"""

from fastapi import APIRouter, Depends

from shared.models import Identity
from ..middleware.auth import get_current_user

router = APIRouter()


@router.get("/me", response_model=Identity)
async def get_current_user_profile(
    user: Identity = Depends(get_current_user),
) -> Identity:
    """
    Get the current user's profile.

    The identity is re-read from the store on every request, so the role
    reflects changes made after the token was issued.
    """
    return user
