"""Tests for provider factory functions."""

import pytest

from providers.clipdrop import ClipDropImageGenerator
from providers.cloudinary_store import CloudinaryImageStore
from providers.factory import (
    create_document_extractor,
    create_image_generator,
    create_image_store,
    create_text_generator,
    get_text_api_key,
)
from providers.gemini import GeminiProvider
from providers.openai import OpenAIProvider
from providers.pdf import PdfTextExtractor
from shared.config import Settings


class TestTextGenerator:
    def test_gemini_default(self):
        generator = create_text_generator(Settings(google_api_key="g-key"))

        assert isinstance(generator._provider, GeminiProvider)
        assert generator._config.model_id == "gemini-2.0-flash"
        assert generator._config.api_key == "g-key"

    def test_openai(self):
        settings = Settings(text_provider="openai", text_model="gpt-4o-mini", openai_api_key="sk-key")

        generator = create_text_generator(settings)

        assert isinstance(generator._provider, OpenAIProvider)
        assert generator.provider_name == "openai"
        assert get_text_api_key(settings) == "sk-key"

    def test_unknown_provider(self):
        settings = Settings().model_copy(update={"text_provider": "llama"})
        with pytest.raises(ValueError, match="Unknown text provider 'llama'"):
            create_text_generator(settings)

    def test_missing_key_does_not_fail_at_build(self):
        """A missing key should surface on the first request, not at start-up."""
        generator = create_text_generator(Settings(google_api_key=""))
        assert generator._llm is None


class TestOtherAdapters:
    def test_image_generator(self):
        generator = create_image_generator(Settings(clipdrop_api_key="c-key", provider_timeout=30))

        assert isinstance(generator, ClipDropImageGenerator)
        assert generator.is_configured
        assert generator._timeout == 30

    def test_image_store(self):
        store = create_image_store(Settings(
            cloudinary_cloud_name="demo",
            cloudinary_api_key="123",
            cloudinary_api_secret="shh",
        ))

        assert isinstance(store, CloudinaryImageStore)
        assert store.is_configured

    def test_document_extractor(self):
        assert isinstance(create_document_extractor(), PdfTextExtractor)
