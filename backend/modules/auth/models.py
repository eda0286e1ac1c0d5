"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import PlanTier


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="Postgres role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)

    @property
    def plan(self) -> PlanTier:
        """Plan tier from the server-controlled app_metadata claim."""
        if self.app_metadata.get("plan") == PlanTier.PREMIUM.value:
            return PlanTier.PREMIUM
        return PlanTier.FREE


class UserProfile(BaseModel):
    """
    Public-facing profile of a user.

    Used to attach author names to published creations and community posts.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: Optional[str] = Field(None, description="Email address")
    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
