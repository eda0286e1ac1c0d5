"""
Centralized configuration for the Promptly backend.

All settings are loaded from environment variables with sensible defaults.
Provider-specific settings are namespaced (e.g., CLOUDINARY_*, CLIPDROP_*).
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Promptly API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (identity provider + creations database)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, used by run_migrations.py

    # Text generation
    text_provider: Literal["gemini", "openai"] = "gemini"
    text_model: str = "gemini-2.0-flash"
    google_api_key: str = ""
    openai_api_key: str = ""

    # Image generation (ClipDrop)
    clipdrop_api_key: str = ""
    clipdrop_api_url: str = "https://clipdrop-api.co/text-to-image/v1"

    # Image hosting and transformations (Cloudinary)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""

    # Outbound HTTP calls to providers
    provider_timeout: float = 120.0  # seconds
    verify_object_removal: bool = True

    # Quota
    free_usage_limit: int = 10

    # Uploads
    upload_dir: Path = Path("uploads")
    max_image_upload_bytes: int = 10 * 1024 * 1024
    max_resume_upload_bytes: int = 5 * 1024 * 1024

    @field_validator("text_provider", mode="before")
    @classmethod
    def normalize_text_provider(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
