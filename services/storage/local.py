"""
Local file system storage provider.

Stores objects under ``<local_path>/<bucket>/``. Suitable for development
and single-server deployments; objects are served by ``/api/images``.
"""

import logging
from datetime import datetime
from pathlib import Path

import aiofiles
import aiofiles.os

from .base import StorageConfig, StorageObject, StorageProvider

logger = logging.getLogger(__name__)


class LocalStorageProvider(StorageProvider):
    """Local file system storage provider."""

    def __init__(self, config: StorageConfig):
        self.config = config
        self.base_path = Path(config.local_path) / config.bucket_name
        self._public_url = config.public_url

        self.base_path.mkdir(parents=True, exist_ok=True)

    @property
    def name(self) -> str:
        return "local"

    @property
    def is_available(self) -> bool:
        return True

    def _get_full_path(self, key: str) -> Path:
        """Resolve a key inside the bucket directory, rejecting traversal."""
        path = (self.base_path / key).resolve()
        if not path.is_relative_to(self.base_path.resolve()):
            raise ValueError(f"Invalid storage key: {key}")
        return path

    async def save(
        self,
        key: str,
        data: bytes,
        content_type: str = "image/jpeg",
    ) -> StorageObject:
        file_path = self._get_full_path(key)

        await aiofiles.os.makedirs(file_path.parent, exist_ok=True)

        async with aiofiles.open(file_path, "wb") as f:
            await f.write(data)

        logger.debug(f"Saved file to local storage: {key}")

        return StorageObject(
            key=key,
            filename=file_path.name,
            size=len(data),
            content_type=content_type,
            created_at=datetime.now().isoformat(),
            public_url=self.get_public_url(key),
        )

    async def load(self, key: str) -> bytes | None:
        try:
            file_path = self._get_full_path(key)
        except ValueError:
            return None

        if not file_path.is_file():
            return None

        async with aiofiles.open(file_path, "rb") as f:
            return await f.read()

    def get_public_url(self, key: str) -> str | None:
        """Public URL if configured, otherwise the API proxy path."""
        if self._public_url:
            return f"{self._public_url.rstrip('/')}/{key}"
        return f"/api/images/{key}"
