"""
Authentication module interface.

Other modules should depend on ITokenService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import Identity
from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for bearer token operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    @property
    def expires_in_seconds(self) -> int:
        """Validity window of issued tokens."""
        ...

    def issue(self, identity: Identity) -> str:
        """
        Issue a signed, time-bounded token for an identity.

        Args:
            identity: The user the token is issued to

        Returns:
            Encoded token string
        """
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature, structure and expiry.

        Args:
            token: Encoded token string

        Returns:
            The decoded claims

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the validity window has elapsed
            InvalidTokenError: If the token is malformed or tampered with
        """
        ...

    async def resolve_identity(self, claims: TokenClaims) -> Identity:
        """
        Load the current Identity referenced by the claims.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def authenticate(self, token: str) -> Identity:
        """
        Verify a token and resolve its Identity.

        Raises:
            AuthenticationError: If the token is missing, invalid, expired
                or references a user that no longer exists
        """
        ...
