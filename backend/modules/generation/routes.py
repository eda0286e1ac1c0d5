"""
Content generation endpoints (mounted under /api/ai).

Every endpoint answers HTTP 200 with `{success, content}` or
`{success: false, message}`; only authentication failures produce 401.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_generation_service
from api.middleware.auth import get_current_user
from shared.config import get_settings
from shared.models import AuthenticatedUser
from shared.uploads import read_upload

from .interfaces import IGenerationService
from .models import GenerationResponse, ImageGenerationRequest, TextGenerationRequest

router = APIRouter()


@router.post(
    "/write-article",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def write_article(
    request: TextGenerationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Generate an article from a prompt. Metered for free users."""
    return await service.write_article(user, request)


@router.post(
    "/blog-titles",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def blog_titles(
    request: TextGenerationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Generate blog title ideas. Metered for free users."""
    return await service.generate_blog_titles(user, request)


@router.post(
    "/generate-images",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def generate_images(
    request: ImageGenerationRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Generate an image from a prompt. Premium only."""
    return await service.generate_image(user, request)


@router.post(
    "/remove-background",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def remove_background(
    image: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Remove the background of an uploaded image. Premium only."""
    upload = await read_upload(image, get_settings().max_image_upload_bytes)
    return await service.remove_background(user, upload)


@router.post(
    "/remove-object",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def remove_object(
    image: Optional[UploadFile] = File(None),
    object_name: Optional[str] = Form(None, alias="object"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Erase a named object from an uploaded image. Premium only."""
    upload = await read_upload(image, get_settings().max_image_upload_bytes)
    return await service.remove_object(user, upload, object_name)


@router.post(
    "/review-resume",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
)
async def review_resume(
    resume: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IGenerationService = Depends(get_generation_service),
) -> GenerationResponse:
    """Critique an uploaded PDF resume. Premium only."""
    upload = await read_upload(resume, get_settings().max_resume_upload_bytes)
    return await service.review_resume(user, upload)
