"""
Quota gate implementation.

The free-usage counter lives in the identity provider's server-only
metadata under `free_usage`. The increment after a successful generation
is a separate network call from the generation itself and from the
creation insert: a crash in between under-counts usage. That is an
accepted risk, not something this service tries to hide with retries.
"""

import logging
from typing import Optional

from shared.config import get_settings
from shared.models import AuthenticatedUser, PlanTier

from modules.auth.interfaces import IAuthService

from .interfaces import IQuotaService
from .models import (
    Capability,
    DenialReason,
    METERED_CAPABILITIES,
    QuotaDecision,
    QuotaStatus,
)

logger = logging.getLogger(__name__)

USAGE_KEY = "free_usage"


class QuotaService(IQuotaService):
    """Per-plan gate backed by identity-provider metadata."""

    def __init__(self, auth: IAuthService, free_limit: Optional[int] = None):
        """
        Args:
            auth: Identity service that stores the counter
            free_limit: Free ceiling for metered capabilities. Defaults to
                        the FREE_USAGE_LIMIT setting.
        """
        self._auth = auth
        self._free_limit = free_limit if free_limit is not None else get_settings().free_usage_limit

    @property
    def free_limit(self) -> int:
        return self._free_limit

    async def check_and_track(
        self,
        user: AuthenticatedUser,
        capability: Capability,
    ) -> QuotaDecision:
        if user.plan == PlanTier.PREMIUM:
            return QuotaDecision(capability=capability, plan=user.plan, permit=True)

        if capability not in METERED_CAPABILITIES:
            return QuotaDecision(
                capability=capability,
                plan=user.plan,
                permit=False,
                remaining=0,
                reason=DenialReason.PREMIUM_REQUIRED,
            )

        usage = await self._read_usage(user.id)
        permit = usage < self._free_limit
        decision = QuotaDecision(
            capability=capability,
            plan=user.plan,
            permit=permit,
            usage=usage,
            limit=self._free_limit,
            remaining=max(self._free_limit - usage, 0),
            reason=None if permit else DenialReason.LIMIT_REACHED,
        )

        if not permit:
            logger.info(f"User {user.id} reached the free limit for {capability.value}")
        return decision

    async def record_usage(
        self,
        user: AuthenticatedUser,
        decision: QuotaDecision,
    ) -> None:
        if not decision.permit or not decision.is_metered:
            return

        try:
            await self._auth.update_private_metadata(
                user.id,
                {USAGE_KEY: decision.usage + 1},
            )
        except Exception as e:
            logger.warning(f"Usage update failed for user {user.id}: {e}")

    async def get_status(self, user: AuthenticatedUser) -> QuotaStatus:
        if user.plan == PlanTier.PREMIUM:
            return QuotaStatus(plan=user.plan)

        usage = await self._read_usage(user.id)
        return QuotaStatus(
            plan=user.plan,
            used=usage,
            limit=self._free_limit,
            remaining=max(self._free_limit - usage, 0),
        )

    async def _read_usage(self, user_id: str) -> int:
        """Read the counter, initialising it to 0 the first time."""
        metadata = await self._auth.get_private_metadata(user_id)
        usage = metadata.get(USAGE_KEY)

        if not usage:
            await self._auth.update_private_metadata(user_id, {USAGE_KEY: 0})
            return 0

        try:
            return int(usage)
        except (TypeError, ValueError):
            logger.warning(f"Unreadable usage counter for user {user_id}: {usage!r}, resetting")
            await self._auth.update_private_metadata(user_id, {USAGE_KEY: 0})
            return 0
