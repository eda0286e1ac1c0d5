"""
Creation repository for database access.

Encapsulates all Supabase queries for the `creations` table. Likes are a
Postgres `text[]` of user IDs on the row itself.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .exceptions import InvalidPublishError
from .models import Creation, CreationType, NewCreation, PUBLISHABLE_TYPES


class CreationRepository(BaseRepository[Creation]):
    """
    Repository for creation rows.

    Note: This repository does NOT perform authorization checks.
    The service layer decides whose rows are visible.
    """

    def create(self, creation: NewCreation) -> Creation:
        """
        Insert one creation.

        Raises:
            InvalidPublishError: If publish is set on a non-image creation
        """
        if creation.publish and creation.type not in PUBLISHABLE_TYPES:
            raise InvalidPublishError(creation.type.value)

        data = {
            "user_id": creation.user_id,
            "prompt": creation.prompt,
            "content": creation.content,
            "type": creation.type.value,
            "publish": creation.publish,
        }
        result = self._db.table("creations").insert(data).execute()
        return self._map_to_creation(result.data[0])

    def get_by_id(self, creation_id: int) -> Optional[Creation]:
        result = self._db.table("creations").select("*").eq("id", creation_id).execute()
        if not result.data:
            return None
        return self._map_to_creation(result.data[0])

    def list_for_user(self, user_id: str) -> list[Creation]:
        """All of a user's creations, newest first."""
        result = (
            self._db.table("creations")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_creation(row) for row in result.data]

    def list_private(self, user_id: str) -> list[Creation]:
        """A user's unpublished creations (publish false or null), newest first."""
        result = (
            self._db.table("creations")
            .select("*")
            .eq("user_id", user_id)
            .or_("publish.is.false,publish.is.null")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_creation(row) for row in result.data]

    def list_published(self) -> list[Creation]:
        """Published images from every user, newest first."""
        result = (
            self._db.table("creations")
            .select("*")
            .eq("publish", True)
            .eq("type", CreationType.IMAGE.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_creation(row) for row in result.data]

    def set_likes(self, creation_id: int, likes: list[str]) -> None:
        """Overwrite the likes array."""
        data = {"likes": likes, "updated_at": self._now()}
        self._db.table("creations").update(data).eq("id", creation_id).execute()

    def _map_to_creation(self, data: dict[str, Any]) -> Creation:
        """Map database row to Creation model."""
        return Creation(
            id=data["id"],
            user_id=str(data["user_id"]),
            prompt=data["prompt"],
            content=data["content"],
            type=CreationType(data["type"]),
            publish=bool(data.get("publish")),
            likes=data.get("likes") or [],
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )
