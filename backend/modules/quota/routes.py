"""
Quota status endpoint (mounted under /api/user).
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_quota_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IQuotaService
from .models import QuotaStatus

router = APIRouter()


@router.get("/usage", response_model=QuotaStatus)
async def get_usage(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IQuotaService = Depends(get_quota_service),
) -> QuotaStatus:
    """
    Current plan and free-tier usage.

    `remaining` is null for premium users.
    """
    return await service.get_status(user)
