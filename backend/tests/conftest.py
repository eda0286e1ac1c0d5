"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser, PlanTier


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    plan: Optional[str] = None,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        plan: Value for app_metadata.plan ("premium" for premium users)
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "app_metadata": {"plan": plan} if plan else {},
        "user_metadata": {},
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_user(user_id: str = "test-user-123", premium: bool = False) -> AuthenticatedUser:
    """Build an AuthenticatedUser without going through JWT validation."""
    return AuthenticatedUser(
        id=user_id,
        email="test@example.com",
        plan=PlanTier.PREMIUM if premium else PlanTier.FREE,
    )


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container and cached settings around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings with a JWT secret and a per-test upload directory."""
    return Settings(
        supabase_jwt_secret=TEST_JWT_SECRET,
        upload_dir=tmp_path / "uploads",
    )


@pytest.fixture
def mock_db() -> MagicMock:
    """A MagicMock standing in for the Supabase client."""
    return MagicMock()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for a free user."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def premium_headers(test_user_id: str) -> dict[str, str]:
    """Authorization headers for a premium user."""
    return {"Authorization": f"Bearer {create_test_token(user_id=test_user_id, plan='premium')}"}


@pytest.fixture
def client(test_settings: Settings, mock_db: MagicMock):
    """
    TestClient whose auth service validates tokens with TEST_JWT_SECRET.

    Tests override the other services through app.dependency_overrides.
    """
    from fastapi.testclient import TestClient

    from api.app import app
    from api.dependencies import get_auth_service
    from modules.auth.service import AuthService

    auth = AuthService(db=mock_db, settings=test_settings)
    app.dependency_overrides[get_auth_service] = lambda: auth
    yield TestClient(app)
    app.dependency_overrides.clear()
