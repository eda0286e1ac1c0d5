"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


# Row IDs as clients send them: a number, or a string that may or may not be one.
RecordId = Union[int, str]


class PlanTier(str, Enum):
    """Access level attached to an identity."""

    FREE = "free"
    PREMIUM = "premium"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from the Supabase JWT claims and made available to route
    handlers via dependency injection. The plan comes from the server-only
    `app_metadata.plan` claim, so clients cannot upgrade themselves.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: Optional[str] = Field(None, description="User's email address")
    plan: PlanTier = Field(default=PlanTier.FREE, description="Plan tier")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def is_premium(self) -> bool:
        return self.plan == PlanTier.PREMIUM


def parse_record_id(value: Optional[RecordId]) -> Optional[int]:
    """Integer row ID for `value`, or None when it cannot name a row."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return None
