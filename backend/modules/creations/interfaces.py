"""
Creations module interface.

The generation pipeline records through ICreationService; the API layer
reads and toggles likes through it.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import RecordId

from .models import (
    Creation,
    CreationType,
    PublishedCreation,
    ToggleLikeResponse,
)


@runtime_checkable
class ICreationService(Protocol):
    """
    Interface for creation records.
    """

    async def record(
        self,
        user_id: str,
        prompt: str,
        content: str,
        creation_type: CreationType,
        publish: bool = False,
    ) -> Creation:
        """
        Store the result of one successful generation.

        Raises:
            InvalidPublishError: If publish is set for a non-image creation
            PersistenceError: If the insert fails
        """
        ...

    async def get_user_creations(self, user_id: str) -> list[Creation]:
        """The caller's unpublished creations, newest first."""
        ...

    async def get_all_user_creations(self, user_id: str) -> list[Creation]:
        """Every creation the caller owns, newest first."""
        ...

    async def get_published_creations(self, viewer_id: str) -> list[PublishedCreation]:
        """
        Published images from all users, newest first, with the viewer's
        like state and each author's name.
        """
        ...

    async def toggle_like(
        self,
        user_id: str,
        creation_id: Optional[RecordId],
    ) -> ToggleLikeResponse:
        """
        Like the creation if the user hasn't, unlike it if they have.

        Raises:
            CreationIdRequiredError: If creation_id is missing
            CreationNotFoundError: If the creation does not exist
            PersistenceError: If the read or write fails
        """
        ...
