"""
Bearer token authentication dependencies.

Extracts the bearer token, verifies it through the token service and
resolves the caller's current Identity.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import ITokenService
from shared.models import Identity

from ..dependencies import get_token_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: ITokenService = Depends(get_token_service),
) -> Identity:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.post("/movies")
        async def create(user: Identity = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    return await tokens.authenticate(credentials.credentials)

