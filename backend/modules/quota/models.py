"""
Quota module data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import PlanTier


class Capability(str, Enum):
    """One generation operation exposed by the API."""

    ARTICLE = "article"
    BLOG_TITLE = "blog-title"
    IMAGE = "image"
    REMOVE_BACKGROUND = "remove-background"
    REMOVE_OBJECT = "remove-object"
    RESUME_REVIEW = "resume-review"


# Free users may use these up to the free ceiling; everything else is premium-only
METERED_CAPABILITIES = frozenset({Capability.ARTICLE, Capability.BLOG_TITLE})


class DenialReason(str, Enum):
    """Why the gate refused a request."""

    LIMIT_REACHED = "limit_reached"
    PREMIUM_REQUIRED = "premium_required"


class QuotaDecision(BaseModel):
    """Result of a quota check for one request."""

    capability: Capability = Field(..., description="Capability being requested")
    plan: PlanTier = Field(..., description="Plan tier of the caller")
    permit: bool = Field(..., description="Whether the request may proceed")
    usage: Optional[int] = Field(
        None,
        description="Counter value read at check time (None when not metered)",
    )
    limit: Optional[int] = Field(None, description="Free ceiling (None when not metered)")
    remaining: Optional[int] = Field(
        None,
        description="Calls left after this check (None means unlimited)",
    )
    reason: Optional[DenialReason] = Field(None, description="Set when permit is False")

    model_config = {"frozen": True}

    @property
    def is_metered(self) -> bool:
        """True when a successful call must bump the free-usage counter."""
        return self.usage is not None


class QuotaStatus(BaseModel):
    """Read-only view of a user's quota, for the dashboard."""

    plan: PlanTier
    used: Optional[int] = None
    limit: Optional[int] = None
    remaining: Optional[int] = None
