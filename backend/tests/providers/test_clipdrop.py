"""Tests for the ClipDrop text-to-image provider."""

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from providers.base import ProviderError
from providers.clipdrop import ClipDropImageGenerator

API_URL = "https://clipdrop-api.co/text-to-image/v1"


def response(status_code: int, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("POST", API_URL), **kwargs)


@pytest.fixture
def mock_client():
    with patch("providers.clipdrop.httpx.AsyncClient") as client_cls:
        client = AsyncMock()
        client_cls.return_value.__aenter__.return_value = client
        yield client


class TestClipDropImageGenerator:
    @pytest.mark.asyncio
    async def test_generate(self, mock_client):
        mock_client.post.return_value = response(200, content=b"\x89PNG")
        generator = ClipDropImageGenerator(api_key="clip-key", api_url=API_URL)

        image = await generator.generate("cats in Anime style")

        assert image == b"\x89PNG"
        mock_client.post.assert_awaited_once_with(
            API_URL,
            files={"prompt": (None, "cats in Anime style")},
            headers={"x-api-key": "clip-key"},
        )

    @pytest.mark.asyncio
    async def test_not_configured(self, mock_client):
        generator = ClipDropImageGenerator(api_key="", api_url=API_URL)

        assert generator.is_configured is False
        with pytest.raises(ProviderError, match="not configured"):
            await generator.generate("cats")
        mock_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_error_body_is_surfaced(self, mock_client):
        """ClipDrop's JSON error text should reach the user."""
        mock_client.post.return_value = response(402, json={"error": "Not enough credits"})
        generator = ClipDropImageGenerator(api_key="clip-key", api_url=API_URL)

        with pytest.raises(ProviderError) as exc_info:
            await generator.generate("cats")

        assert exc_info.value.message == "Not enough credits"
        assert exc_info.value.provider == "clipdrop"

    @pytest.mark.asyncio
    async def test_error_without_json(self, mock_client):
        mock_client.post.return_value = response(500, content=b"oops")
        generator = ClipDropImageGenerator(api_key="clip-key", api_url=API_URL)

        with pytest.raises(ProviderError, match="failed with status 500"):
            await generator.generate("cats")

    @pytest.mark.asyncio
    async def test_timeout(self, mock_client):
        mock_client.post.side_effect = httpx.ReadTimeout("timed out")
        generator = ClipDropImageGenerator(api_key="clip-key", api_url=API_URL)

        with pytest.raises(ProviderError, match="Image generation failed: timed out"):
            await generator.generate("cats")
