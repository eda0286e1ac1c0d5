"""
Community module data models.

Community posts are images a user shares explicitly, separate from the
publish flag on creations. Response fields use the camelCase names the
web client reads.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import RecordId


class CommunityPost(BaseModel):
    """A stored community_posts row."""

    id: int = Field(..., description="Post ID")
    user_id: str = Field(..., description="Author ID")
    image_url: str = Field(..., description="Hosted image URL")
    description: str = Field(..., description="Caption written by the author")
    created_at: datetime = Field(..., description="When the post was shared")


class PostAuthor(BaseModel):
    """Author block attached to each post in the feed."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    image_url: Optional[str] = Field(None, alias="imageUrl")


class CommunityPostView(CommunityPost):
    """A post as seen by one viewer."""

    like_count: int = Field(default=0, description="Number of likes")
    is_liked: bool = Field(default=False, description="Whether the viewer liked it")
    user: PostAuthor


class PostListResponse(BaseModel):
    success: bool = True
    posts: list[CommunityPostView] = Field(default_factory=list)
    message: Optional[str] = None


class PostedImage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl")
    description: str


class PostImageResponse(BaseModel):
    success: bool
    message: str
    data: Optional[PostedImage] = None


class ToggleLikePostRequest(BaseModel):
    """Body of POST /api/community/toggle-like."""

    model_config = ConfigDict(populate_by_name=True)

    post_id: Optional[RecordId] = Field(None, alias="postId")
