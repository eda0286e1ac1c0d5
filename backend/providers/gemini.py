"""Google Gemini chat model.

Handles Google's Gemini models via the langchain-google-genai package.
Requires a valid API key for authentication.
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from .base import ModelConfig
from .llm import ChatModelProvider


class GeminiProvider(ChatModelProvider):
    """Provider for Google Gemini models.

    Available models:
        - gemini-2.0-flash (fast and efficient, default)
        - gemini-2.0-flash-lite (fastest, most economical)
        - gemini-1.5-pro (previous generation, most capable)
    """

    name = "gemini"

    def get_llm(self, config: ModelConfig) -> ChatGoogleGenerativeAI:
        """Return a ChatGoogleGenerativeAI client configured for Gemini.

        Raises:
            ValueError: If api_key is not provided
        """
        if not config.api_key:
            raise ValueError(
                "Google AI API key is required. "
                "Set it via the GOOGLE_API_KEY environment variable."
            )

        return ChatGoogleGenerativeAI(
            model=config.model_id,
            google_api_key=config.api_key,
        )
