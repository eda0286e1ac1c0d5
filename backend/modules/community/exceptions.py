"""
Community module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError
from shared.models import RecordId


class PostNotFoundError(NotFoundError):
    """Raised when a post ID does not exist."""

    def __init__(self, post_id: RecordId):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class PostIdRequiredError(ValidationError):
    def __init__(self):
        super().__init__("Post ID is required", code="POST_ID_REQUIRED")


class DescriptionRequiredError(ValidationError):
    def __init__(self):
        super().__init__("Description is required", code="DESCRIPTION_REQUIRED")
