"""
Pluggable object storage for prompt images.

Supports multiple storage backends:
- Local file system (development)
- MinIO (self-hosted S3-compatible)

Usage:
    from services.storage import get_storage_manager

    storage = get_storage_manager()
    url = await storage.upload_image(jpeg_bytes)
"""

from .base import StorageConfig, StorageObject, StorageProvider
from .manager import StorageManager, generate_object_key

_storage_manager: StorageManager | None = None


def get_storage_config() -> StorageConfig:
    """
    Get storage configuration from application settings.
    """
    from core.config import get_settings

    settings = get_settings()

    config = StorageConfig(
        backend=settings.storage_backend,
        bucket_name=settings.storage_bucket,
        public_url=settings.storage_public_url,
        local_path=settings.storage_local_path,
    )

    if settings.storage_backend == "minio":
        config.endpoint = settings.minio_endpoint
        config.access_key = settings.minio_access_key
        config.secret_key = settings.minio_secret_key
        config.use_ssl = settings.minio_use_ssl

    return config


def get_storage_manager() -> StorageManager:
    """Get or create the shared storage manager."""
    global _storage_manager

    if _storage_manager is None:
        _storage_manager = StorageManager(get_storage_config())

    return _storage_manager


def clear_storage_cache():
    """Forget the cached storage manager (used when settings change)."""
    global _storage_manager
    _storage_manager = None


__all__ = [
    "StorageConfig",
    "StorageObject",
    "StorageProvider",
    "StorageManager",
    "generate_object_key",
    "get_storage_config",
    "get_storage_manager",
    "clear_storage_cache",
]
