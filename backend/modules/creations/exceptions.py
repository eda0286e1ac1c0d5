"""
Creations module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError
from shared.models import RecordId


class CreationNotFoundError(NotFoundError):
    """Raised when a creation ID does not exist."""

    def __init__(self, creation_id: RecordId):
        super().__init__(
            "Creation not found",
            code="CREATION_NOT_FOUND",
            details={"creation_id": creation_id},
        )


class CreationIdRequiredError(ValidationError):
    """Raised when a like toggle arrives without a creation ID."""

    def __init__(self):
        super().__init__("Creation ID is required", code="CREATION_ID_REQUIRED")


class InvalidPublishError(ValidationError):
    """Raised when publish=true is requested for a non-image creation."""

    def __init__(self, creation_type: str):
        super().__init__(
            "Only image creations can be published",
            code="INVALID_PUBLISH",
            details={"type": creation_type},
        )
