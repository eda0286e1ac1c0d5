"""
Creations module.

Stores one row per successful generation and serves the personal and
published feeds, including likes on published images.

Public interface:
- ICreationService: Protocol defining creation operations
- Creation, PublishedCreation, CreationType: Data models
- Exceptions: CreationNotFoundError, CreationIdRequiredError, InvalidPublishError
"""

from .interfaces import ICreationService
from .models import (
    Creation,
    CreationListResponse,
    CreationType,
    NewCreation,
    PublishedCreation,
    PublishedCreationListResponse,
    ToggleLikeCreationRequest,
    ToggleLikeResponse,
)
from .exceptions import (
    CreationIdRequiredError,
    CreationNotFoundError,
    InvalidPublishError,
)

__all__ = [
    "ICreationService",
    "Creation",
    "CreationListResponse",
    "CreationType",
    "NewCreation",
    "PublishedCreation",
    "PublishedCreationListResponse",
    "ToggleLikeCreationRequest",
    "ToggleLikeResponse",
    "CreationIdRequiredError",
    "CreationNotFoundError",
    "InvalidPublishError",
]
