"""
Creation feed endpoints (mounted under /api/user).

Failures are reported as HTTP 200 with `success: false`; clients branch
on the body, not the status code.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_creation_service
from api.middleware.auth import get_current_user
from shared.exceptions import PromptlyError
from shared.models import AuthenticatedUser

from .interfaces import ICreationService
from .models import (
    CreationListResponse,
    PublishedCreationListResponse,
    ToggleLikeCreationRequest,
    ToggleLikeResponse,
)

router = APIRouter()


@router.get(
    "/get-user-creations",
    response_model=CreationListResponse,
)
async def get_user_creations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICreationService = Depends(get_creation_service),
) -> CreationListResponse:
    """The caller's private (unpublished) creations."""
    try:
        creations = await service.get_user_creations(user.id)
    except PromptlyError as e:
        return CreationListResponse(success=False, message=e.message)
    return CreationListResponse(creations=creations)


@router.get(
    "/get-all-user-creations",
    response_model=CreationListResponse,
)
async def get_all_user_creations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICreationService = Depends(get_creation_service),
) -> CreationListResponse:
    """Every creation the caller owns, newest first."""
    try:
        creations = await service.get_all_user_creations(user.id)
    except PromptlyError as e:
        return CreationListResponse(success=False, message=e.message)
    return CreationListResponse(creations=creations)


@router.get(
    "/get-published-creations",
    response_model=PublishedCreationListResponse,
)
async def get_published_creations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICreationService = Depends(get_creation_service),
) -> PublishedCreationListResponse:
    """Published images from all users with like counts and author names."""
    try:
        creations = await service.get_published_creations(user.id)
    except PromptlyError as e:
        return PublishedCreationListResponse(success=False, message=e.message)
    return PublishedCreationListResponse(creations=creations)


@router.post(
    "/toggle-like-creations",
    response_model=ToggleLikeResponse,
    response_model_exclude_none=True,
)
async def toggle_like_creations(
    request: ToggleLikeCreationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICreationService = Depends(get_creation_service),
) -> ToggleLikeResponse:
    try:
        return await service.toggle_like(user.id, request.creation_id)
    except PromptlyError as e:
        return ToggleLikeResponse(success=False, message=e.message)
