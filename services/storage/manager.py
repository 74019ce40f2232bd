"""
Unified storage manager.

High-level interface for uploading prompt images, abstracting away the
underlying storage backend.
"""

import logging
import secrets
import string
import time

from core.exceptions import StorageError

from .base import StorageConfig, StorageProvider

logger = logging.getLogger(__name__)

_TOKEN_ALPHABET = string.digits + string.ascii_lowercase
TOKEN_LENGTH = 6


def generate_object_key(now_ms: int | None = None) -> str:
    """
    Generate a storage key for an uploaded image.

    Format: ``{epochMillis}-{randomToken}.jpg``
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    token = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))
    return f"{now_ms}-{token}.jpg"


class StorageManager:
    """
    Routes operations to the configured storage backend.
    """

    def __init__(self, config: StorageConfig):
        self.config = config
        self._provider = self._create_provider()

    def _create_provider(self) -> StorageProvider:
        """Create storage provider based on configuration."""
        backend = self.config.backend.lower()

        if backend == "local":
            from .local import LocalStorageProvider

            return LocalStorageProvider(self.config)
        elif backend == "minio":
            from .minio import MinIOStorageProvider

            return MinIOStorageProvider(self.config)
        else:
            raise ValueError(f"Unknown storage backend: {backend}")

    @property
    def provider(self) -> StorageProvider:
        """Get the underlying storage provider."""
        return self._provider

    @property
    def is_available(self) -> bool:
        """Check if storage is available."""
        return self._provider.is_available

    async def upload_image(self, payload: bytes) -> str:
        """
        Store a JPEG payload and return its public URL.

        Raises:
            StorageError: If the backend is unavailable or the write fails
        """
        if not self.is_available:
            raise StorageError(message=f"Storage backend '{self._provider.name}' is not available")

        key = generate_object_key()
        try:
            obj = await self._provider.save(key, payload, content_type="image/jpeg")
        except Exception as e:
            logger.error(f"Failed to upload image {key}: {e}")
            raise StorageError(details={"key": key, "error": str(e)}) from e

        url = obj.public_url or self._provider.get_public_url(key)
        if not url:
            raise StorageError(message="Uploaded object has no public URL", details={"key": key})

        logger.info(f"Uploaded image {key} ({len(payload)} bytes)")
        return url

    async def load_image_bytes(self, key: str) -> bytes | None:
        """Load raw bytes of a stored image, or None if missing."""
        return await self._provider.load(key)
