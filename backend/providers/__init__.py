"""Generation provider adapters.

One adapter per external concern: text completion (LangChain chat models),
text-to-image (ClipDrop), image hosting and transforms (Cloudinary), and
resume text extraction (pypdf).
"""

from .base import (
    DocumentTextExtractor,
    ImageGenerator,
    ImageStore,
    ModelConfig,
    ProviderError,
    StoredImage,
    TextGenerator,
)
from .factory import (
    TEXT_PROVIDERS,
    create_document_extractor,
    create_image_generator,
    create_image_store,
    create_text_generator,
)

__all__ = [
    "DocumentTextExtractor",
    "ImageGenerator",
    "ImageStore",
    "ModelConfig",
    "ProviderError",
    "StoredImage",
    "TextGenerator",
    "TEXT_PROVIDERS",
    "create_document_extractor",
    "create_image_generator",
    "create_image_store",
    "create_text_generator",
]
