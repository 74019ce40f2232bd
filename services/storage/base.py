"""
Storage provider abstract base class and data types.

This module defines the interface that all storage backends must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StorageConfig:
    """Storage backend configuration."""

    # Backend type: local, minio
    backend: str = "local"

    # Common settings
    bucket_name: str = "prompts"
    public_url: str | None = None  # CDN/public URL prefix

    # Authentication
    access_key: str | None = None
    secret_key: str | None = None

    # Endpoint settings
    endpoint: str | None = None
    use_ssl: bool = False

    # Local storage settings
    local_path: str = "outputs/storage"


@dataclass
class StorageObject:
    """A stored object and where it can be fetched from."""

    key: str
    filename: str
    size: int = 0
    content_type: str = "image/jpeg"
    created_at: str = ""  # ISO timestamp
    public_url: str | None = None


class StorageProvider(ABC):
    """
    Abstract base class for storage backends.

    All storage providers must implement this interface.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name: local, minio."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend is configured and available."""

    @abstractmethod
    async def save(
        self,
        key: str,
        data: bytes,
        content_type: str = "image/jpeg",
    ) -> StorageObject:
        """
        Save data to storage.

        Args:
            key: Storage key/path
            data: Raw bytes to store
            content_type: MIME type

        Returns:
            StorageObject with storage info
        """

    @abstractmethod
    async def load(self, key: str) -> bytes | None:
        """
        Load data from storage.

        Returns:
            Raw bytes or None if not found
        """

    @abstractmethod
    def get_public_url(self, key: str) -> str | None:
        """
        Get a permanent public URL for a key.

        Returns:
            Public URL or None if not available
        """
