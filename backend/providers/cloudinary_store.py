"""Cloudinary image hosting and transformations.

Credentials are passed on every SDK call from an injected CloudinaryConfig,
so the process-wide `cloudinary.config()` is never mutated.

The SDK is synchronous; uploads run in a worker thread.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

import cloudinary.uploader
import cloudinary.utils
import httpx
from pydantic import BaseModel

from .base import ImageStore, ProviderError, StoredImage

logger = logging.getLogger(__name__)


class CloudinaryConfig(BaseModel):
    """Account credentials for Cloudinary."""

    model_config = {"frozen": True}

    cloud_name: str = ""
    api_key: str = ""
    api_secret: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def credentials(self) -> dict[str, str]:
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
        }


class CloudinaryImageStore(ImageStore):
    """Stores images on Cloudinary and builds transformation URLs."""

    name = "cloudinary"

    def __init__(self, config: CloudinaryConfig, timeout: float = 120.0):
        self._config = config
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return self._config.is_configured

    async def _upload(self, source: Any, **options: Any) -> StoredImage:
        if not self._config.is_configured:
            raise ProviderError(self.name, "Cloudinary credentials are not configured")

        try:
            result = await asyncio.to_thread(
                cloudinary.uploader.upload,
                source,
                **options,
                **self._config.credentials(),
            )
        except Exception as e:
            logger.error(f"Cloudinary upload failed: {e}")
            raise ProviderError(self.name, f"Image upload failed: {e}")

        return StoredImage(
            public_id=result["public_id"],
            secure_url=result["secure_url"],
        )

    async def upload_data_uri(self, data_uri: str) -> StoredImage:
        return await self._upload(data_uri)

    async def upload_file(
        self,
        path: Path,
        folder: Optional[str] = None,
        public_id: Optional[str] = None,
    ) -> StoredImage:
        options: dict[str, Any] = {}
        if folder:
            options["folder"] = folder
        if public_id:
            options["public_id"] = public_id
        return await self._upload(str(path), **options)

    async def upload_with_background_removal(self, path: Path) -> StoredImage:
        return await self._upload(
            str(path),
            transformation=[{"effect": "background_removal"}],
        )

    def object_removal_url(self, public_id: str, object_name: str) -> str:
        """Delivery URL that erases `object_name` from the stored image.

        The transformation is applied lazily by Cloudinary on first fetch.
        """
        url, _ = cloudinary.utils.cloudinary_url(
            public_id,
            transformation=[{"effect": f"gen_remove:prompt_{object_name}"}],
            resource_type="image",
            fetch_format="auto",
            quality="auto",
            secure=True,
            cloud_name=self._config.cloud_name,
        )
        return url

    async def verify_url(self, url: str) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.head(url)
                response.raise_for_status()
            return True
        except httpx.HTTPError as e:
            logger.warning(f"Transformed image check failed for {url}: {e}")
            return False
