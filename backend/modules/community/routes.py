"""
Community feed endpoints (mounted under /api/community).
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_community_service
from api.middleware.auth import get_current_user
from shared.exceptions import PromptlyError
from shared.config import get_settings
from shared.models import AuthenticatedUser
from shared.uploads import read_upload

from modules.creations.models import ToggleLikeResponse

from .interfaces import ICommunityService
from .models import (
    PostedImage,
    PostImageResponse,
    PostListResponse,
    ToggleLikePostRequest,
)

router = APIRouter()


@router.post(
    "/post-image",
    response_model=PostImageResponse,
    response_model_exclude_none=True,
)
async def post_image(
    image: Optional[UploadFile] = File(None),
    description: Optional[str] = Form(None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommunityService = Depends(get_community_service),
) -> PostImageResponse:
    """Share an image with a description on the community feed."""
    try:
        upload = await read_upload(image, get_settings().max_image_upload_bytes)
        post = await service.post_image(user.id, upload, description)
    except PromptlyError as e:
        return PostImageResponse(success=False, message=e.message)

    return PostImageResponse(
        success=True,
        message="Image posted successfully",
        data=PostedImage(image_url=post.image_url, description=post.description),
    )


@router.get(
    "/posts",
    response_model=PostListResponse,
)
async def list_posts(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommunityService = Depends(get_community_service),
) -> PostListResponse:
    try:
        posts = await service.list_posts(user.id)
    except PromptlyError as e:
        return PostListResponse(success=False, message=e.message)
    return PostListResponse(posts=posts)


@router.post(
    "/toggle-like",
    response_model=ToggleLikeResponse,
    response_model_exclude_none=True,
)
async def toggle_like(
    request: ToggleLikePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICommunityService = Depends(get_community_service),
) -> ToggleLikeResponse:
    try:
        return await service.toggle_like(user.id, request.post_id)
    except PromptlyError as e:
        return ToggleLikeResponse(success=False, message=e.message)
