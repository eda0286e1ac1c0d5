"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.config import get_settings
from shared.exceptions import AuthenticationError
from shared.log import configure_logging

from .routes import health
from modules.community.routes import router as community_router
from modules.creations.routes import router as creations_router
from modules.generation.routes import router as generation_router
from modules.quota.routes import router as quota_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Bad, missing or expired credentials, or a failed identity lookup."""
    return JSONResponse(
        status_code=401,
        content=exc.to_dict(),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="AI content generation API: articles, titles, images and resume reviews",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Server is live!"

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(generation_router, prefix="/api/ai", tags=["generation"])
    app.include_router(creations_router, prefix="/api/user", tags=["creations"])
    app.include_router(quota_router, prefix="/api/user", tags=["quota"])
    app.include_router(community_router, prefix="/api/community", tags=["community"])

    return app


# Application instance for uvicorn
app = create_app()
