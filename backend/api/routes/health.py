"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import is_database_configured
from providers.factory import get_text_api_key

router = APIRouter()

CONFIGURED = "configured"
NOT_CONFIGURED = "not configured"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth: str
    text_provider: str
    image_generation: str
    image_storage: str


def _state(configured: bool) -> str:
    return CONFIGURED if configured else NOT_CONFIGURED


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports which external services have credentials. Nothing is contacted,
    so a configured service may still be unreachable.
    """
    settings = get_settings()
    checks = {
        "database": is_database_configured(),
        "auth": bool(settings.supabase_jwt_secret),
        "text_provider": bool(get_text_api_key(settings)),
        "image_generation": bool(settings.clipdrop_api_key),
        "image_storage": bool(
            settings.cloudinary_cloud_name
            and settings.cloudinary_api_key
            and settings.cloudinary_api_secret
        ),
    }

    return ReadinessResponse(
        status="ready" if all(checks.values()) else "degraded",
        **{name: _state(ok) for name, ok in checks.items()},
    )
