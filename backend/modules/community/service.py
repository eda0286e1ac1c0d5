"""
Community service implementation.

Like toggles check for an existing like row, then insert or delete. The
check and the write are separate queries, so two concurrent likes by the
same user can both insert. That race is accepted.
"""

import logging
import time
from collections import Counter
from pathlib import Path
from typing import Optional

from shared.exceptions import PersistenceError, PromptlyError
from shared.models import RecordId, parse_record_id
from shared.uploads import IMAGE_POLICY, UploadedFile, UploadPolicy, stored_upload

from modules.auth.interfaces import IAuthService
from modules.auth.models import UserProfile
from modules.auth.profiles import FALLBACK_FIRST_NAME, FALLBACK_LAST_NAME, get_profiles
from modules.creations.models import ToggleLikeResponse
from providers.base import ImageStore

from .exceptions import DescriptionRequiredError, PostIdRequiredError, PostNotFoundError
from .interfaces import ICommunityService
from .models import CommunityPost, CommunityPostView, PostAuthor
from .repository import CommunityRepository

logger = logging.getLogger(__name__)

COMMUNITY_FOLDER = "community"
TOGGLE_FAILED_MESSAGE = "Something went wrong while toggling like."


class CommunityService(ICommunityService):
    """Community feed backed by CommunityRepository and the image store."""

    def __init__(
        self,
        repository: CommunityRepository,
        auth: IAuthService,
        image_store: ImageStore,
        upload_dir: Path,
        image_policy: UploadPolicy = IMAGE_POLICY,
    ):
        self._repo = repository
        self._auth = auth
        self._store = image_store
        self._upload_dir = upload_dir
        self._image_policy = image_policy

    async def post_image(
        self,
        user_id: str,
        image: Optional[UploadedFile],
        description: Optional[str],
    ) -> CommunityPost:
        self._image_policy.validate_file(image)

        description = (description or "").strip()
        if not description:
            raise DescriptionRequiredError()

        with stored_upload(image, self._image_policy, self._upload_dir) as path:
            stored = await self._store.upload_file(
                path,
                folder=COMMUNITY_FOLDER,
                public_id=f"community_{int(time.time() * 1000)}",
            )

        try:
            post = self._repo.create_post(user_id, stored.secure_url, description)
        except Exception as e:
            logger.error(f"Failed to save community post for user {user_id}: {e}")
            raise PersistenceError("Failed to post image to community")

        logger.info(f"User {user_id} shared community post {post.id}")
        return post

    async def list_posts(self, viewer_id: str) -> list[CommunityPostView]:
        try:
            posts = self._repo.list_posts()
            likes = self._repo.list_likes([p.id for p in posts])
        except Exception as e:
            logger.error(f"Failed to list community posts: {e}")
            raise PersistenceError(str(e))

        like_counts = Counter(like["post_id"] for like in likes)
        liked_by_viewer = {like["post_id"] for like in likes if like["user_id"] == viewer_id}
        profiles = await get_profiles(self._auth, (p.user_id for p in posts))

        views = []
        for post in posts:
            views.append(CommunityPostView(
                **post.model_dump(),
                like_count=like_counts.get(post.id, 0),
                is_liked=post.id in liked_by_viewer,
                user=self._author(post.user_id, profiles.get(post.user_id)),
            ))
        return views

    async def toggle_like(
        self,
        user_id: str,
        post_id: Optional[RecordId],
    ) -> ToggleLikeResponse:
        if not post_id:
            raise PostIdRequiredError()

        record_id = parse_record_id(post_id)
        if record_id is None:
            raise PostNotFoundError(post_id)
        post_id = record_id

        try:
            if self._repo.get_post(post_id) is None:
                raise PostNotFoundError(post_id)

            if self._repo.has_like(user_id, post_id):
                self._repo.remove_like(user_id, post_id)
                return ToggleLikeResponse(
                    success=True,
                    liked=False,
                    message="You unliked this post.",
                )

            self._repo.add_like(user_id, post_id)
            return ToggleLikeResponse(
                success=True,
                liked=True,
                message="You liked this post!",
            )
        except PromptlyError:
            raise
        except Exception as e:
            logger.error(f"Like toggle failed for post {post_id}: {e}")
            raise PersistenceError(TOGGLE_FAILED_MESSAGE)

    @staticmethod
    def _author(user_id: str, profile: Optional[UserProfile]) -> PostAuthor:
        if profile is None:
            return PostAuthor(
                id=user_id,
                first_name=FALLBACK_FIRST_NAME,
                last_name=FALLBACK_LAST_NAME,
            )
        return PostAuthor(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            image_url=profile.avatar_url,
        )
