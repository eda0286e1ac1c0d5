"""
Creations service implementation.

Records generations and serves the personal and published feeds. Like
toggles read the likes array and write back the updated copy with no
compare-and-swap: two concurrent toggles by the same user can both see
"not liked". That race is accepted.
"""

import logging
from typing import Optional

from shared.exceptions import PersistenceError, PromptlyError
from shared.models import RecordId, parse_record_id

from modules.auth.interfaces import IAuthService
from modules.auth.profiles import FALLBACK_FIRST_NAME, FALLBACK_LAST_NAME, get_profiles

from .exceptions import CreationIdRequiredError, CreationNotFoundError
from .interfaces import ICreationService
from .models import (
    Creation,
    CreationType,
    NewCreation,
    PublishedCreation,
    ToggleLikeResponse,
)
from .repository import CreationRepository

logger = logging.getLogger(__name__)

TOGGLE_FAILED_MESSAGE = "Something went wrong while toggling like."


class CreationService(ICreationService):
    """Creation records backed by CreationRepository."""

    def __init__(self, repository: CreationRepository, auth: IAuthService):
        self._repo = repository
        self._auth = auth

    async def record(
        self,
        user_id: str,
        prompt: str,
        content: str,
        creation_type: CreationType,
        publish: bool = False,
    ) -> Creation:
        new_creation = NewCreation(
            user_id=user_id,
            prompt=prompt,
            content=content,
            type=creation_type,
            publish=publish,
        )
        try:
            return self._repo.create(new_creation)
        except PromptlyError:
            raise
        except Exception as e:
            logger.error(f"Failed to record {creation_type.value} for user {user_id}: {e}")
            raise PersistenceError(f"Failed to save creation: {e}")

    async def get_user_creations(self, user_id: str) -> list[Creation]:
        try:
            return self._repo.list_private(user_id)
        except Exception as e:
            logger.error(f"Failed to list private creations for user {user_id}: {e}")
            raise PersistenceError(str(e))

    async def get_all_user_creations(self, user_id: str) -> list[Creation]:
        try:
            return self._repo.list_for_user(user_id)
        except Exception as e:
            logger.error(f"Failed to list creations for user {user_id}: {e}")
            raise PersistenceError(str(e))

    async def get_published_creations(self, viewer_id: str) -> list[PublishedCreation]:
        try:
            creations = self._repo.list_published()
        except Exception as e:
            logger.error(f"Failed to list published creations: {e}")
            raise PersistenceError(str(e))

        profiles = await get_profiles(self._auth, (c.user_id for c in creations))

        published = []
        for creation in creations:
            profile = profiles.get(creation.user_id)
            if profile is None:
                first_name, last_name = FALLBACK_FIRST_NAME, FALLBACK_LAST_NAME
            else:
                first_name, last_name = profile.first_name, profile.last_name

            published.append(PublishedCreation(
                **creation.model_dump(),
                like_count=len(creation.likes),
                is_liked=viewer_id in creation.likes,
                first_name=first_name,
                last_name=last_name,
            ))
        return published

    async def toggle_like(
        self,
        user_id: str,
        creation_id: Optional[RecordId],
    ) -> ToggleLikeResponse:
        if not creation_id:
            raise CreationIdRequiredError()

        record_id = parse_record_id(creation_id)
        if record_id is None:
            raise CreationNotFoundError(creation_id)
        creation_id = record_id

        try:
            creation = self._repo.get_by_id(creation_id)
            if creation is None:
                raise CreationNotFoundError(creation_id)

            if user_id in creation.likes:
                likes = [uid for uid in creation.likes if uid != user_id]
                self._repo.set_likes(creation_id, likes)
                return ToggleLikeResponse(
                    success=True,
                    liked=False,
                    message="You unliked this creation.",
                )

            self._repo.set_likes(creation_id, [*creation.likes, user_id])
            return ToggleLikeResponse(
                success=True,
                liked=True,
                message="You liked this creation!",
            )
        except PromptlyError:
            raise
        except Exception as e:
            logger.error(f"Like toggle failed for creation {creation_id}: {e}")
            raise PersistenceError(TOGGLE_FAILED_MESSAGE)
