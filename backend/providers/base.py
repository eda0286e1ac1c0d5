"""Base classes and models for generation providers.

Each capability talks to exactly one adapter type. Adapters translate a
normalized request into one provider call and either return the normalized
result or raise ProviderError with the provider's message.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from shared.exceptions import ExternalServiceError


class ProviderError(ExternalServiceError):
    """Raised when a downstream generation service fails.

    The message is shown to the user as-is.
    """

    def __init__(
        self,
        provider: str,
        message: str,
        original_error: Optional[str] = None,
    ):
        super().__init__(
            message,
            service=provider,
            code="PROVIDER_ERROR",
            details={"original_error": original_error} if original_error else None,
        )
        self.provider = provider


class ModelConfig(BaseModel):
    """Configuration for a chat model.

    Attributes:
        provider_type: Provider key (e.g., "gemini", "openai")
        model_id: Model identifier (e.g., "gemini-2.0-flash")
        api_key: API key for the provider
    """

    model_config = {"frozen": True}

    provider_type: str
    model_id: str
    api_key: str = ""


class StoredImage(BaseModel):
    """An image hosted by the image store."""

    model_config = {"frozen": True}

    public_id: str
    secure_url: str


class TextGenerator(ABC):
    """Single-prompt text completion."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the model's answer to one prompt, trimmed."""
        pass


class ImageGenerator(ABC):
    """Text-to-image generation."""

    @abstractmethod
    async def generate(self, prompt: str) -> bytes:
        """Return the raw bytes of the generated image."""
        pass


class ImageStore(ABC):
    """Permanent image hosting with URL-based transformations."""

    @abstractmethod
    async def upload_data_uri(self, data_uri: str) -> StoredImage:
        pass

    @abstractmethod
    async def upload_file(
        self,
        path: Path,
        folder: Optional[str] = None,
        public_id: Optional[str] = None,
    ) -> StoredImage:
        pass

    @abstractmethod
    async def upload_with_background_removal(self, path: Path) -> StoredImage:
        pass

    @abstractmethod
    def object_removal_url(self, public_id: str, object_name: str) -> str:
        pass

    @abstractmethod
    async def verify_url(self, url: str) -> bool:
        """Best-effort reachability check; never raises."""
        pass


class DocumentTextExtractor(ABC):
    """Plain-text extraction from an uploaded document."""

    @abstractmethod
    def extract_text(self, path: Path) -> str:
        pass
