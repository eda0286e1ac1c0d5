"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Provider adapters are built here once from Settings and injected, so no
service reads provider credentials on its own.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.community.interfaces import ICommunityService
    from modules.community.repository import CommunityRepository
    from modules.creations.interfaces import ICreationService
    from modules.creations.repository import CreationRepository
    from modules.generation.interfaces import IGenerationService
    from modules.quota.interfaces import IQuotaService
    from providers.base import DocumentTextExtractor, ImageGenerator, ImageStore, TextGenerator


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._auth_service: "IAuthService | None" = None
        self._quota_service: "IQuotaService | None" = None
        self._creation_repository: "CreationRepository | None" = None
        self._creation_service: "ICreationService | None" = None
        self._community_repository: "CommunityRepository | None" = None
        self._community_service: "ICommunityService | None" = None
        self._generation_service: "IGenerationService | None" = None
        self._text_generator: "TextGenerator | None" = None
        self._image_generator: "ImageGenerator | None" = None
        self._image_store: "ImageStore | None" = None
        self._document_extractor: "DocumentTextExtractor | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # -------------------------------------------------------------------------
    # Providers
    # -------------------------------------------------------------------------

    @property
    def text_generator(self) -> "TextGenerator":
        if self._text_generator is None:
            from providers.factory import create_text_generator
            self._text_generator = create_text_generator(self.settings)
        return self._text_generator

    @property
    def image_generator(self) -> "ImageGenerator":
        if self._image_generator is None:
            from providers.factory import create_image_generator
            self._image_generator = create_image_generator(self.settings)
        return self._image_generator

    @property
    def image_store(self) -> "ImageStore":
        if self._image_store is None:
            from providers.factory import create_image_store
            self._image_store = create_image_store(self.settings)
        return self._image_store

    @property
    def document_extractor(self) -> "DocumentTextExtractor":
        if self._document_extractor is None:
            from providers.factory import create_document_extractor
            self._document_extractor = create_document_extractor()
        return self._document_extractor

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(settings=self.settings)
        return self._auth_service

    @property
    def quota(self) -> "IQuotaService":
        """Get the quota service instance."""
        if self._quota_service is None:
            from modules.quota.service import QuotaService
            self._quota_service = QuotaService(
                auth=self.auth,
                free_limit=self.settings.free_usage_limit,
            )
        return self._quota_service

    @property
    def creation_repository(self) -> "CreationRepository":
        """Get the creation repository instance."""
        if self._creation_repository is None:
            from modules.creations.repository import CreationRepository
            from shared.database import get_supabase_client
            self._creation_repository = CreationRepository(get_supabase_client())
        return self._creation_repository

    @property
    def creations(self) -> "ICreationService":
        """Get the creation service instance."""
        if self._creation_service is None:
            from modules.creations.service import CreationService
            self._creation_service = CreationService(
                repository=self.creation_repository,
                auth=self.auth,
            )
        return self._creation_service

    @property
    def community_repository(self) -> "CommunityRepository":
        """Get the community repository instance."""
        if self._community_repository is None:
            from modules.community.repository import CommunityRepository
            from shared.database import get_supabase_client
            self._community_repository = CommunityRepository(get_supabase_client())
        return self._community_repository

    @property
    def community(self) -> "ICommunityService":
        """Get the community service instance."""
        if self._community_service is None:
            from modules.community.service import CommunityService
            from shared.uploads import IMAGE_POLICY
            self._community_service = CommunityService(
                repository=self.community_repository,
                auth=self.auth,
                image_store=self.image_store,
                upload_dir=self.settings.upload_dir,
                image_policy=IMAGE_POLICY.with_max_bytes(self.settings.max_image_upload_bytes),
            )
        return self._community_service

    @property
    def generation(self) -> "IGenerationService":
        """Get the generation pipeline instance."""
        if self._generation_service is None:
            from modules.generation.service import GenerationService
            from shared.uploads import IMAGE_POLICY, RESUME_POLICY
            settings = self.settings
            self._generation_service = GenerationService(
                quota=self.quota,
                creations=self.creations,
                text_generator=self.text_generator,
                image_generator=self.image_generator,
                image_store=self.image_store,
                document_extractor=self.document_extractor,
                upload_dir=settings.upload_dir,
                image_policy=IMAGE_POLICY.with_max_bytes(settings.max_image_upload_bytes),
                resume_policy=RESUME_POLICY.with_max_bytes(settings.max_resume_upload_bytes),
                verify_object_removal=settings.verify_object_removal,
            )
        return self._generation_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._quota_service = None
        self._creation_repository = None
        self._creation_service = None
        self._community_repository = None
        self._community_service = None
        self._generation_service = None
        self._text_generator = None
        self._image_generator = None
        self._image_store = None
        self._document_extractor = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_quota_service() -> "IQuotaService":
    """FastAPI dependency for quota service."""
    return get_container().quota


def get_creation_service() -> "ICreationService":
    """FastAPI dependency for creation service."""
    return get_container().creations


def get_community_service() -> "ICommunityService":
    """FastAPI dependency for community service."""
    return get_container().community


def get_generation_service() -> "IGenerationService":
    """FastAPI dependency for the generation pipeline."""
    return get_container().generation
