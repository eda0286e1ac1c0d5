"""LangChain-backed text generation.

Chat model providers build a LangChain client from a ModelConfig; the
LangChainTextGenerator sends one prompt to it and normalizes the answer.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage

from .base import ModelConfig, ProviderError, TextGenerator

logger = logging.getLogger(__name__)


class ChatModelProvider(ABC):
    """Builds a LangChain chat client for one provider family."""

    name: str = ""

    @abstractmethod
    def get_llm(self, config: ModelConfig) -> BaseChatModel:
        """Return a configured chat client.

        Raises:
            ValueError: If the configuration is incomplete
        """
        pass


def message_text(message: BaseMessage) -> str:
    """Flatten a chat message's content to plain text.

    Gemini may return a list of content parts instead of a string.
    """
    content = message.content
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class LangChainTextGenerator(TextGenerator):
    """Single-turn, non-streaming completion over a LangChain chat model.

    The client is built on first use so that a missing API key surfaces as
    a provider error on the request rather than at start-up.
    """

    def __init__(self, provider: ChatModelProvider, config: ModelConfig):
        self._provider = provider
        self._config = config
        self._llm: Optional[BaseChatModel] = None

    @property
    def provider_name(self) -> str:
        return self._provider.name

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            try:
                self._llm = self._provider.get_llm(self._config)
            except ValueError as e:
                raise ProviderError(self.provider_name, str(e))
        return self._llm

    async def generate(self, prompt: str) -> str:
        llm = self._get_llm()

        try:
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"{self.provider_name} completion failed: {e}")
            raise ProviderError(self.provider_name, str(e) or "Text generation failed")

        text = message_text(response).strip()
        if not text:
            raise ProviderError(self.provider_name, "The model returned an empty response")
        return text
