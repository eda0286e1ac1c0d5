"""OpenAI chat model.

Handles OpenAI's GPT models via the langchain-openai package.
"""

from langchain_openai import ChatOpenAI

from .base import ModelConfig
from .llm import ChatModelProvider


class OpenAIProvider(ChatModelProvider):
    """Provider for OpenAI GPT models (e.g., gpt-4o-mini, gpt-4o)."""

    name = "openai"

    def get_llm(self, config: ModelConfig) -> ChatOpenAI:
        """Return a ChatOpenAI client.

        Raises:
            ValueError: If api_key is not provided
        """
        if not config.api_key:
            raise ValueError(
                "OpenAI API key is required. "
                "Set it via the OPENAI_API_KEY environment variable."
            )

        return ChatOpenAI(
            model=config.model_id,
            api_key=config.api_key,
        )
