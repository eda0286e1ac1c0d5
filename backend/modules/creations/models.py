"""
Creations module data models.

A creation is the stored record of one generation: the prompt the user
sent and what came back (text, or a hosted image URL).
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import RecordId


class CreationType(str, Enum):
    """Capability tag stored on each creation row."""

    ARTICLE = "article"
    BLOG_TITLE = "blog-title"
    IMAGE = "image"
    RESUME_REVIEW = "resume-review"


# Only images may be shown on the public feed
PUBLISHABLE_TYPES = frozenset({CreationType.IMAGE})


class NewCreation(BaseModel):
    """Fields the pipeline supplies when recording a generation."""

    user_id: str = Field(..., description="Owner ID")
    prompt: str = Field(..., description="Prompt as recorded for the user")
    content: str = Field(..., description="Generated text or hosted image URL")
    type: CreationType = Field(..., description="Capability tag")
    publish: bool = Field(default=False, description="Show on the public feed")


class Creation(BaseModel):
    """A stored creation row."""

    id: int = Field(..., description="Creation ID")
    user_id: str = Field(..., description="Owner ID")
    prompt: str = Field(..., description="Prompt as recorded for the user")
    content: str = Field(..., description="Generated text or hosted image URL")
    type: CreationType = Field(..., description="Capability tag")
    publish: bool = Field(default=False, description="Shown on the public feed")
    likes: list[str] = Field(default_factory=list, description="IDs of users who liked it")
    created_at: datetime = Field(..., description="When the creation was recorded")
    updated_at: Optional[datetime] = Field(None, description="Last like change")


class PublishedCreation(Creation):
    """A published image with like state and author name for the viewer."""

    like_count: int = Field(default=0, description="Number of likes")
    is_liked: bool = Field(default=False, description="Whether the viewer liked it")
    first_name: Optional[str] = Field(None, description="Author's first name")
    last_name: Optional[str] = Field(None, description="Author's last name")


class CreationListResponse(BaseModel):
    success: bool = True
    creations: list[Creation] = Field(default_factory=list)
    message: Optional[str] = None


class PublishedCreationListResponse(BaseModel):
    success: bool = True
    creations: list[PublishedCreation] = Field(default_factory=list)
    message: Optional[str] = None


class ToggleLikeCreationRequest(BaseModel):
    """Body of POST /api/user/toggle-like-creations."""

    model_config = ConfigDict(populate_by_name=True)

    creation_id: Optional[RecordId] = Field(None, alias="creationId")


class ToggleLikeResponse(BaseModel):
    """Outcome of a like toggle, shared by creations and community posts."""

    success: bool
    liked: Optional[bool] = None
    message: str
