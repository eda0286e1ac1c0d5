"""
Authentication module.

Validates bearer tokens, resolves the caller's plan tier, and reads
identity-provider metadata (display names, plan flags).

Public API:
- IAuthService: token validation and identity lookups
- get_profiles: batch author-name lookup for feeds
- UserProfile / JWTPayload: identity models
- InvalidTokenError, ExpiredTokenError, MissingTokenError,
  AuthNotConfiguredError, IdentityLookupError
"""

from .interfaces import IAuthService
from .models import JWTPayload, UserProfile
from .profiles import get_profiles
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    IdentityLookupError,
    InvalidTokenError,
    MissingTokenError,
)

__all__ = [
    "IAuthService",
    "get_profiles",
    "JWTPayload",
    "UserProfile",
    "AuthNotConfiguredError",
    "ExpiredTokenError",
    "IdentityLookupError",
    "InvalidTokenError",
    "MissingTokenError",
]
