"""
Generation module interface.

Every method runs the same pipeline: validate input, pass the quota gate,
call one provider adapter, record the creation, count usage, respond.
Handled failures come back as `GenerationResponse(success=False)`; only
authentication failures are raised.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from shared.uploads import UploadedFile

from .models import GenerationResponse, ImageGenerationRequest, TextGenerationRequest


@runtime_checkable
class IGenerationService(Protocol):
    """Interface for the content generation pipeline."""

    async def write_article(
        self,
        user: AuthenticatedUser,
        request: TextGenerationRequest,
    ) -> GenerationResponse:
        ...

    async def generate_blog_titles(
        self,
        user: AuthenticatedUser,
        request: TextGenerationRequest,
    ) -> GenerationResponse:
        ...

    async def generate_image(
        self,
        user: AuthenticatedUser,
        request: ImageGenerationRequest,
    ) -> GenerationResponse:
        """Content is the hosted image URL."""
        ...

    async def remove_background(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
    ) -> GenerationResponse:
        ...

    async def remove_object(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
        object_name: Optional[str],
    ) -> GenerationResponse:
        ...

    async def review_resume(
        self,
        user: AuthenticatedUser,
        resume: Optional[UploadedFile],
    ) -> GenerationResponse:
        """Content is the critique text."""
        ...
