"""
Generation module exceptions.
"""

from shared.exceptions import ValidationError


class PromptRequiredError(ValidationError):
    """Raised when a text or image request has no prompt."""

    def __init__(self, message: str = "Prompt is required."):
        super().__init__(message, code="PROMPT_REQUIRED")


class ObjectNameRequiredError(ValidationError):
    """Raised when object removal is missing the image or the object name."""

    def __init__(self):
        super().__init__("Missing image or object name", code="OBJECT_NAME_REQUIRED")
