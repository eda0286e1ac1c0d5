"""
Community module.

Explicitly shared images with descriptions, and likes on them.

Public interface:
- ICommunityService: Protocol defining community operations
- CommunityPost, CommunityPostView, PostAuthor: Data models
- Exceptions: PostNotFoundError, PostIdRequiredError, DescriptionRequiredError
"""

from .interfaces import ICommunityService
from .models import (
    CommunityPost,
    CommunityPostView,
    PostAuthor,
    PostedImage,
    PostImageResponse,
    PostListResponse,
    ToggleLikePostRequest,
)
from .exceptions import (
    DescriptionRequiredError,
    PostIdRequiredError,
    PostNotFoundError,
)

__all__ = [
    "ICommunityService",
    "CommunityPost",
    "CommunityPostView",
    "PostAuthor",
    "PostedImage",
    "PostImageResponse",
    "PostListResponse",
    "ToggleLikePostRequest",
    "DescriptionRequiredError",
    "PostIdRequiredError",
    "PostNotFoundError",
]
