"""
Quota module interface.

The generation pipeline depends on IQuotaService to decide whether a request
may reach a provider and to count successful free-tier calls.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Capability, QuotaDecision, QuotaStatus


@runtime_checkable
class IQuotaService(Protocol):
    """Interface for the per-plan quota gate."""

    async def check_and_track(
        self,
        user: AuthenticatedUser,
        capability: Capability,
    ) -> QuotaDecision:
        """
        Decide whether the user may use a capability right now.

        Premium users are always permitted and their counter is never read.
        Free users are counted for metered capabilities and refused
        premium-only ones without contacting the identity provider.

        Raises:
            IdentityLookupError: If the counter cannot be read
        """
        ...

    async def record_usage(
        self,
        user: AuthenticatedUser,
        decision: QuotaDecision,
    ) -> None:
        """
        Count one successful call against a metered decision.

        Never raises: a failed increment is logged and the generation stands.
        """
        ...

    async def get_status(self, user: AuthenticatedUser) -> QuotaStatus:
        """Current plan and free-tier usage for display."""
        ...
