"""
Community module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import RecordId
from shared.uploads import UploadedFile

from modules.creations.models import ToggleLikeResponse

from .models import CommunityPost, CommunityPostView


@runtime_checkable
class ICommunityService(Protocol):
    """
    Interface for the community image feed.
    """

    async def post_image(
        self,
        user_id: str,
        image: Optional[UploadedFile],
        description: Optional[str],
    ) -> CommunityPost:
        """
        Upload an image to the community folder and create a post for it.

        Raises:
            UploadValidationError: If the image is missing, not an image, or too large
            DescriptionRequiredError: If the description is blank
            ProviderError: If the image store rejects the upload
            PersistenceError: If the insert fails
        """
        ...

    async def list_posts(self, viewer_id: str) -> list[CommunityPostView]:
        """All posts, newest first, with like state and author info."""
        ...

    async def toggle_like(
        self,
        user_id: str,
        post_id: Optional[RecordId],
    ) -> ToggleLikeResponse:
        """
        Like the post if the user hasn't, unlike it if they have.

        Raises:
            PostIdRequiredError: If post_id is missing
            PostNotFoundError: If the post does not exist
            PersistenceError: If a query fails
        """
        ...
