"""
Generation module.

The content generation pipeline behind /api/ai: articles, blog titles,
images, background and object removal, and resume reviews.

Public interface:
- IGenerationService: Protocol defining the capabilities
- GenerationResponse, TextGenerationRequest, ImageGenerationRequest: Models
- Exceptions: PromptRequiredError, ObjectNameRequiredError
"""

from .interfaces import IGenerationService
from .models import GenerationResponse, ImageGenerationRequest, TextGenerationRequest
from .exceptions import ObjectNameRequiredError, PromptRequiredError

__all__ = [
    "IGenerationService",
    "GenerationResponse",
    "ImageGenerationRequest",
    "TextGenerationRequest",
    "ObjectNameRequiredError",
    "PromptRequiredError",
]
