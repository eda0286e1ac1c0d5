"""
Promptly API package.

Provides the FastAPI application for the Promptly content generation service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
