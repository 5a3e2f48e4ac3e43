"""
Token service implementation.

Issues and verifies HS256-signed JWT bearer tokens. Verification is a pure
function of the token and the signing secret: there is no server-side
session record, so an issued token stays valid until it expires.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import Identity
from modules.users.interfaces import IIdentityService
from modules.users.exceptions import UserNotFoundError

from .interfaces import ITokenService
from .models import TokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenConfigurationError,
)

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = timedelta(hours=24)
_REQUIRED_CLAIMS = ["sub", "email", "exp", "iat"]


class TokenService(ITokenService):
    """
    Implementation of the token service.

    The signing secret is read-only after construction. Identities are
    re-fetched through the identity service on every request so role
    changes and deletions made after issuance are honored.
    """

    def __init__(
        self,
        secret: str,
        identities: IIdentityService,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise TokenConfigurationError()
        self._secret = secret
        self._identities = identities
        self._expires_in = expires_in
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings, identities: IIdentityService) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            identities=identities,
            expires_in=timedelta(seconds=settings.jwt_expires_in_seconds),
            algorithm=settings.jwt_algorithm,
        )

    @property
    def expires_in_seconds(self) -> int:
        return int(self._expires_in.total_seconds())

    def issue(self, identity: Identity) -> str:
        """Issue a token binding the identity's id and email."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(identity.id),
            "email": identity.email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """Verify signature, structure and expiry, and return the claims."""
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
            return TokenClaims(**payload)

        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except (jwt.InvalidTokenError, PydanticValidationError):
            raise InvalidTokenError()

    async def resolve_identity(self, claims: TokenClaims) -> Identity:
        """Load the current Identity for the token subject."""
        return await self._identities.find_by_id(claims.sub)

    async def authenticate(self, token: Optional[str]) -> Identity:
        """Verify a bearer token and resolve the caller's Identity."""
        claims = self.verify(token)
        try:
            return await self.resolve_identity(claims)
        except UserNotFoundError:
            logger.info(f"Token subject no longer exists: {claims.sub}")
            raise InvalidTokenError("Token subject no longer exists")
