"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the identity provider.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity operations.

    Besides token validation, the identity provider stores each user's
    server-only metadata (the free-tier usage counter lives there).
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's public profile by their ID.

        Returns:
            UserProfile if found, None otherwise

        Raises:
            IdentityLookupError: If the identity provider call fails
        """
        ...

    async def get_private_metadata(self, user_id: str) -> dict[str, Any]:
        """
        Read the user's server-only metadata.

        Raises:
            IdentityLookupError: If the identity provider call fails
        """
        ...

    async def update_private_metadata(
        self,
        user_id: str,
        metadata: dict[str, Any],
    ) -> None:
        """
        Merge keys into the user's server-only metadata.

        Raises:
            IdentityLookupError: If the identity provider call fails
        """
        ...
