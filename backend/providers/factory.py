"""Factory functions for creating provider adapters from settings."""

from shared.config import Settings

from .base import ModelConfig
from .clipdrop import ClipDropImageGenerator
from .cloudinary_store import CloudinaryConfig, CloudinaryImageStore
from .gemini import GeminiProvider
from .llm import ChatModelProvider, LangChainTextGenerator
from .openai import OpenAIProvider
from .pdf import PdfTextExtractor


TEXT_PROVIDERS: dict[str, type[ChatModelProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
}


def get_text_api_key(settings: Settings) -> str:
    """Return the API key for the configured text provider."""
    if settings.text_provider == "openai":
        return settings.openai_api_key
    return settings.google_api_key


def create_text_generator(settings: Settings) -> LangChainTextGenerator:
    """Build the text generator selected by TEXT_PROVIDER.

    Raises:
        ValueError: If the provider name is unknown
    """
    provider_cls = TEXT_PROVIDERS.get(settings.text_provider)
    if provider_cls is None:
        raise ValueError(
            f"Unknown text provider '{settings.text_provider}'. "
            f"Expected one of: {', '.join(sorted(TEXT_PROVIDERS))}"
        )

    config = ModelConfig(
        provider_type=settings.text_provider,
        model_id=settings.text_model,
        api_key=get_text_api_key(settings),
    )
    return LangChainTextGenerator(provider_cls(), config)


def create_image_generator(settings: Settings) -> ClipDropImageGenerator:
    return ClipDropImageGenerator(
        api_key=settings.clipdrop_api_key,
        api_url=settings.clipdrop_api_url,
        timeout=settings.provider_timeout,
    )


def create_image_store(settings: Settings) -> CloudinaryImageStore:
    config = CloudinaryConfig(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
    )
    return CloudinaryImageStore(config, timeout=settings.provider_timeout)


def create_document_extractor() -> PdfTextExtractor:
    return PdfTextExtractor()
