"""
Quota module exceptions.
"""

from shared.exceptions import PromptlyError, ValidationError


class QuotaError(PromptlyError):
    """Base exception for quota-related errors."""

    pass


class QuotaExceededError(QuotaError):
    """Raised when a free user has used up the free ceiling."""

    def __init__(self, user_id: str, limit: int):
        super().__init__(
            "Limit Reached, Upgrade to Continue",
            code="QUOTA_EXCEEDED",
            details={"user_id": user_id, "limit": limit},
        )


class PremiumRequiredError(ValidationError):
    """Raised when a free user calls a premium-only capability."""

    def __init__(self, capability: str):
        super().__init__(
            "This feature is only available for premium users",
            code="PREMIUM_REQUIRED",
            details={"capability": capability},
        )
