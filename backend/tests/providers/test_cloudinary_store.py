"""Tests for the Cloudinary image store."""

from pathlib import Path

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from providers.base import ProviderError
from providers.cloudinary_store import CloudinaryConfig, CloudinaryImageStore

CONFIG = CloudinaryConfig(cloud_name="demo", api_key="123", api_secret="shh")
UPLOAD_RESULT = {
    "public_id": "abc123",
    "secure_url": "https://res.cloudinary.com/demo/image/upload/abc123.png",
}


@pytest.fixture
def mock_upload():
    with patch("providers.cloudinary_store.cloudinary.uploader.upload") as upload:
        upload.return_value = UPLOAD_RESULT
        yield upload


class TestCloudinaryConfig:
    def test_is_configured(self):
        assert CONFIG.is_configured
        assert not CloudinaryConfig(cloud_name="demo").is_configured


class TestUploads:
    @pytest.mark.asyncio
    async def test_upload_data_uri(self, mock_upload):
        store = CloudinaryImageStore(CONFIG)

        stored = await store.upload_data_uri("data:image/png;base64,iVBORw==")

        assert stored.public_id == "abc123"
        assert stored.secure_url == UPLOAD_RESULT["secure_url"]
        mock_upload.assert_called_once_with(
            "data:image/png;base64,iVBORw==",
            cloud_name="demo",
            api_key="123",
            api_secret="shh",
        )

    @pytest.mark.asyncio
    async def test_upload_file_with_folder(self, mock_upload):
        store = CloudinaryImageStore(CONFIG)

        await store.upload_file(Path("/tmp/x.png"), folder="community", public_id="community_1")

        args, kwargs = mock_upload.call_args
        assert args == ("/tmp/x.png",)
        assert kwargs["folder"] == "community"
        assert kwargs["public_id"] == "community_1"

    @pytest.mark.asyncio
    async def test_upload_file_without_options(self, mock_upload):
        await CloudinaryImageStore(CONFIG).upload_file(Path("/tmp/x.png"))

        kwargs = mock_upload.call_args.kwargs
        assert "folder" not in kwargs
        assert "public_id" not in kwargs

    @pytest.mark.asyncio
    async def test_background_removal_transformation(self, mock_upload):
        await CloudinaryImageStore(CONFIG).upload_with_background_removal(Path("/tmp/x.png"))

        assert mock_upload.call_args.kwargs["transformation"] == [{"effect": "background_removal"}]

    @pytest.mark.asyncio
    async def test_not_configured(self, mock_upload):
        store = CloudinaryImageStore(CloudinaryConfig())

        with pytest.raises(ProviderError, match="not configured"):
            await store.upload_data_uri("data:image/png;base64,iVBORw==")
        mock_upload.assert_not_called()

    @pytest.mark.asyncio
    async def test_sdk_failure(self, mock_upload):
        mock_upload.side_effect = Exception("Invalid image file")

        with pytest.raises(ProviderError) as exc_info:
            await CloudinaryImageStore(CONFIG).upload_file(Path("/tmp/x.png"))

        assert exc_info.value.message == "Image upload failed: Invalid image file"
        assert exc_info.value.provider == "cloudinary"


class TestObjectRemoval:
    def test_object_removal_url(self):
        url = CloudinaryImageStore(CONFIG).object_removal_url("abc123", "watch")

        assert url.startswith("https://res.cloudinary.com/demo/image/upload/")
        assert "e_gen_remove:prompt_watch" in url
        assert url.endswith("abc123")

    @pytest.mark.asyncio
    async def test_verify_url(self):
        url = "https://res.cloudinary.com/demo/image/upload/abc123"
        with patch("providers.cloudinary_store.httpx.AsyncClient") as client_cls:
            client = AsyncMock()
            client.head.return_value = httpx.Response(200, request=httpx.Request("HEAD", url))
            client_cls.return_value.__aenter__.return_value = client

            assert await CloudinaryImageStore(CONFIG).verify_url(url) is True

    @pytest.mark.asyncio
    async def test_verify_url_failure_is_not_raised(self):
        url = "https://res.cloudinary.com/demo/image/upload/abc123"
        with patch("providers.cloudinary_store.httpx.AsyncClient") as client_cls:
            client = AsyncMock()
            client.head.return_value = httpx.Response(423, request=httpx.Request("HEAD", url))
            client_cls.return_value.__aenter__.return_value = client

            assert await CloudinaryImageStore(CONFIG).verify_url(url) is False
