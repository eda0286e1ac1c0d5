"""
Generation module data models.

Request fields that are required by the pipeline are still Optional here:
a missing prompt must come back as `{success: false, message}` rather than
a 422 from request parsing.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TextGenerationRequest(BaseModel):
    """Body of /api/ai/write-article and /api/ai/blog-titles."""

    prompt: Optional[str] = Field(None, description="Full prompt sent to the text model")
    length: Optional[int] = Field(
        None,
        description="Target length chosen in the client; already reflected in the prompt",
    )


class ImageGenerationRequest(BaseModel):
    """Body of /api/ai/generate-images."""

    prompt: Optional[str] = Field(None, description="What to draw")
    style: Optional[str] = Field(None, description="Optional style, e.g. 'Anime style'")
    publish: bool = Field(default=False, description="Show the result on the public feed")

    def composed_prompt(self) -> str:
        """Prompt sent to the image provider and recorded on the creation."""
        prompt = (self.prompt or "").strip()
        style = (self.style or "").strip()
        if style:
            return f"{prompt} in {style}"
        return prompt


class GenerationResponse(BaseModel):
    """Uniform response of every /api/ai endpoint."""

    success: bool = Field(..., description="False for every handled failure")
    content: Optional[str] = Field(None, description="Generated text or hosted image URL")
    message: Optional[str] = Field(None, description="User-facing failure reason")
