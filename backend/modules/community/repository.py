"""
Community repository for database access.

Tables:
- community_posts
- community_likes (one row per user/post pair, kept unique by the service
  checking before it inserts, not by a constraint)
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import CommunityPost


class CommunityRepository(BaseRepository[CommunityPost]):
    """Repository for community posts and their likes."""

    def create_post(self, user_id: str, image_url: str, description: str) -> CommunityPost:
        data = {
            "user_id": user_id,
            "image_url": image_url,
            "description": description,
            "created_at": self._now(),
        }
        result = self._db.table("community_posts").insert(data).execute()
        return self._map_to_post(result.data[0])

    def get_post(self, post_id: int) -> Optional[CommunityPost]:
        result = self._db.table("community_posts").select("*").eq("id", post_id).execute()
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def list_posts(self) -> list[CommunityPost]:
        """All posts, newest first."""
        result = (
            self._db.table("community_posts")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_post(row) for row in result.data]

    def list_likes(self, post_ids: list[int]) -> list[dict[str, Any]]:
        """Like rows (user_id, post_id) for the given posts."""
        if not post_ids:
            return []
        result = (
            self._db.table("community_likes")
            .select("user_id, post_id")
            .in_("post_id", post_ids)
            .execute()
        )
        return result.data

    def has_like(self, user_id: str, post_id: int) -> bool:
        result = (
            self._db.table("community_likes")
            .select("id")
            .eq("user_id", user_id)
            .eq("post_id", post_id)
            .execute()
        )
        return bool(result.data)

    def add_like(self, user_id: str, post_id: int) -> None:
        data = {"user_id": user_id, "post_id": post_id, "created_at": self._now()}
        self._db.table("community_likes").insert(data).execute()

    def remove_like(self, user_id: str, post_id: int) -> None:
        (
            self._db.table("community_likes")
            .delete()
            .eq("user_id", user_id)
            .eq("post_id", post_id)
            .execute()
        )

    def _map_to_post(self, data: dict[str, Any]) -> CommunityPost:
        """Map database row to CommunityPost model."""
        return CommunityPost(
            id=data["id"],
            user_id=str(data["user_id"]),
            image_url=data["image_url"],
            description=data["description"],
            created_at=data["created_at"],
        )
