"""
Base repository class for database access.

Repositories own every Supabase query for their tables and return Pydantic
models, never raw rows.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Example:
        class CreationRepository(BaseRepository[Creation]):
            def get_by_id(self, creation_id: int) -> Optional[Creation]:
                result = self._db.table("creations").select("*").eq("id", creation_id).execute()
                if not result.data:
                    return None
                return self._map_to_creation(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now() -> str:
        """Current UTC timestamp in the ISO format Postgres expects."""
        return datetime.now(timezone.utc).isoformat()
