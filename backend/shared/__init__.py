"""
Shared infrastructure for Promptly backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- log: Logging setup
- uploads: Upload policies and temp-file handling

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, is_database_configured, reset_client_cache
from .exceptions import (
    PromptlyError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
    PersistenceError,
)
from .log import configure_logging
from .models import AuthenticatedUser, PlanTier, RecordId, parse_record_id
from .uploads import (
    IMAGE_POLICY,
    RESUME_POLICY,
    UploadedFile,
    UploadPolicy,
    UploadValidationError,
    stored_upload,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "is_database_configured",
    "reset_client_cache",
    "PromptlyError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "PersistenceError",
    "configure_logging",
    "AuthenticatedUser",
    "PlanTier",
    "RecordId",
    "parse_record_id",
    "IMAGE_POLICY",
    "RESUME_POLICY",
    "UploadedFile",
    "UploadPolicy",
    "UploadValidationError",
    "stored_upload",
]
