"""
Authentication API endpoints.

Registration, login and a token check endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_identity_service, get_token_service
from api.middleware.auth import get_current_user
from api.models.errors import ERROR_RESPONSES
from shared.models import Identity
from modules.users.interfaces import IIdentityService
from modules.users.models import LoginRequest, RegisterRequest

from .interfaces import ITokenService
from .models import TokenResponse

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/register", response_model=Identity, status_code=201)
async def register(
    request: RegisterRequest,
    identities: IIdentityService = Depends(get_identity_service),
) -> Identity:
    """
    Register a new user.

    The optional role is accepted as sent, including "admin".
    """
    return await identities.register(request.email, request.password, request.role)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    identities: IIdentityService = Depends(get_identity_service),
    tokens: ITokenService = Depends(get_token_service),
) -> TokenResponse:
    """
    Exchange an email and password for a bearer token.

    Unknown emails return 404; wrong passwords return 401.
    """
    identity = await identities.authenticate(request.email, request.password)
    return TokenResponse(
        token=tokens.issue(identity),
        expires_in=tokens.expires_in_seconds,
    )


@router.get("/protected")
async def protected(user: Identity = Depends(get_current_user)) -> str:
    """Returns 200 for any valid bearer token."""
    return "protected route"
