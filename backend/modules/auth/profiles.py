"""
Author lookups for public feeds.
"""

import logging
from typing import Iterable, Optional

from shared.exceptions import PromptlyError

from .interfaces import IAuthService
from .models import UserProfile

logger = logging.getLogger(__name__)

FALLBACK_FIRST_NAME = "Unknown"
FALLBACK_LAST_NAME = "User"


async def get_profiles(
    auth: IAuthService,
    user_ids: Iterable[str],
) -> dict[str, Optional[UserProfile]]:
    """
    Look up each distinct user once.

    A failed or empty lookup maps to None so that one missing author
    does not break the whole feed.
    """
    profiles: dict[str, Optional[UserProfile]] = {}
    for user_id in user_ids:
        if user_id in profiles:
            continue
        try:
            profiles[user_id] = await auth.get_user_by_id(user_id)
        except PromptlyError as e:
            logger.warning(f"Error fetching user {user_id}: {e.message}")
            profiles[user_id] = None
    return profiles
