"""
Base exception classes for the Promptly backend.

Each module defines its own exceptions on top of these. The message is
always user-facing: the generation pipeline and the feed routes return it
verbatim in a `{success: false, message}` body, and only
AuthenticationError changes the HTTP status (401).
"""

from typing import Optional, Any


class PromptlyError(Exception):
    """
    Base exception for all Promptly errors.

    `code` is a stable machine-readable tag (defaults to the class name);
    `details` carries IDs and reasons for logs, never shown to users.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Failure body in the API's `{success, message, error}` shape."""
        return {
            "success": False,
            "message": self.message,
            "error": self.code,
        }


class NotFoundError(PromptlyError):
    """A creation or post ID does not exist."""

    pass


class ValidationError(PromptlyError):
    """Request input (prompt, upload, IDs) was rejected before any provider call."""

    pass


class AuthenticationError(PromptlyError):
    """Missing, invalid or expired credentials, or an unreadable identity. Maps to 401."""

    pass


class ExternalServiceError(PromptlyError):
    """A generation, hosting or identity provider call failed."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class PersistenceError(PromptlyError):
    """A database read or write failed."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = "PERSISTENCE_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
