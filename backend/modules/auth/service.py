"""
Authentication service implementation.

Validates Supabase JWT tokens and reads/writes user metadata through the
Supabase admin API.
"""

import logging
from typing import Any, Optional
import jwt

from supabase import Client

from shared.config import Settings, get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload
from .exceptions import (
    AuthNotConfiguredError,
    IdentityLookupError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Token validation is local (HS256 with the project JWT secret). Metadata
    and profile lookups go to Supabase Auth with the service-role client,
    which is created on first use so that token validation works without
    database configuration.
    """

    def __init__(
        self,
        db: Optional[Client] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = get_supabase_client()
        return self._db

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        The plan tier is read from `app_metadata.plan`, which only the
        service role can write.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        jwt_payload = JWTPayload(**payload)

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            plan=jwt_payload.plan,
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Look up a user's profile in Supabase Auth."""
        user = self._fetch_user(user_id)
        if user is None:
            return None

        user_metadata = user.user_metadata or {}
        return UserProfile(
            id=user.id,
            email=user.email,
            first_name=user_metadata.get("first_name"),
            last_name=user_metadata.get("last_name"),
            avatar_url=user_metadata.get("avatar_url"),
        )

    async def get_private_metadata(self, user_id: str) -> dict[str, Any]:
        """Read app_metadata for a user (empty dict if the user has none)."""
        user = self._fetch_user(user_id)
        if user is None:
            raise IdentityLookupError(user_id, "user not found")
        return dict(user.app_metadata or {})

    async def update_private_metadata(
        self,
        user_id: str,
        metadata: dict[str, Any],
    ) -> None:
        """Merge keys into app_metadata (Supabase merges top-level keys)."""
        try:
            self.db.auth.admin.update_user_by_id(
                user_id,
                {"app_metadata": metadata},
            )
        except Exception as e:
            logger.error(f"Failed to update metadata for user {user_id}: {e}")
            raise IdentityLookupError(user_id, str(e))

    def _fetch_user(self, user_id: str):
        try:
            response = self.db.auth.admin.get_user_by_id(user_id)
        except Exception as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise IdentityLookupError(user_id, str(e))
        return response.user if response else None

