"""ClipDrop text-to-image provider.

API Endpoint: https://clipdrop-api.co/text-to-image/v1
Request is multipart with a single `prompt` field; the response body is
the PNG itself.
"""

import logging

import httpx

from .base import ImageGenerator, ProviderError

logger = logging.getLogger(__name__)


class ClipDropImageGenerator(ImageGenerator):
    """Text-to-image generation through ClipDrop."""

    name = "clipdrop"

    def __init__(self, api_key: str, api_url: str, timeout: float = 120.0):
        self._api_key = api_key
        self._api_url = api_url
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def generate(self, prompt: str) -> bytes:
        if not self._api_key:
            raise ProviderError(self.name, "ClipDrop API key is not configured")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._api_url,
                    files={"prompt": (None, prompt)},
                    headers={"x-api-key": self._api_key},
                )
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(f"ClipDrop returned {e.response.status_code}: {message}")
            raise ProviderError(self.name, message, original_error=str(e))
        except httpx.HTTPError as e:
            logger.error(f"ClipDrop request failed: {e}")
            raise ProviderError(self.name, f"Image generation failed: {e}")


def _error_message(response: httpx.Response) -> str:
    """ClipDrop reports errors as JSON `{"error": "..."}`."""
    try:
        body = response.json()
    except ValueError:
        return f"Image generation failed with status {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Image generation failed with status {response.status_code}"
