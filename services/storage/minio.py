"""
MinIO S3-compatible storage provider.

Stores objects in MinIO or any S3-compatible service, which is how the
``prompts`` bucket is hosted in production. Objects are served straight from
the bucket, so the bucket is given an anonymous read policy.
"""

import asyncio
import json
import logging
from datetime import datetime
from io import BytesIO

from minio import Minio
from minio.error import S3Error

from .base import StorageConfig, StorageObject, StorageProvider

logger = logging.getLogger(__name__)


def public_read_policy(bucket: str) -> str:
    """Bucket policy allowing anonymous GET on every object."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"AWS": ["*"]},
                "Action": ["s3:GetObject"],
                "Resource": [f"arn:aws:s3:::{bucket}/*"],
            }
        ],
    })


class MinIOStorageProvider(StorageProvider):
    """MinIO S3-compatible storage provider."""

    def __init__(self, config: StorageConfig):
        self.config = config
        self.bucket = config.bucket_name
        self._public_url = config.public_url
        self._client: Minio | None = None
        self._endpoint: str | None = None
        self._available = False

        if not all([config.endpoint, config.access_key, config.secret_key]):
            logger.warning("MinIO credentials not fully configured, uploads are disabled")
            return

        self._init_client()

    def _init_client(self):
        """Initialize the MinIO client and make sure the bucket is publicly readable."""
        endpoint = self.config.endpoint
        # Strip protocol prefix if present
        if endpoint.startswith("http://"):
            endpoint = endpoint[7:]
        elif endpoint.startswith("https://"):
            endpoint = endpoint[8:]
        self._endpoint = endpoint.rstrip("/")

        try:
            self._client = Minio(
                endpoint=self._endpoint,
                access_key=self.config.access_key,
                secret_key=self.config.secret_key,
                secure=self.config.use_ssl,
            )

            if not self._client.bucket_exists(self.bucket):
                self._client.make_bucket(self.bucket)
                logger.info(f"Created MinIO bucket: {self.bucket}")

            if not self._public_url:
                self._client.set_bucket_policy(self.bucket, public_read_policy(self.bucket))

            self._available = True
            logger.info(f"MinIO client initialized for bucket: {self.bucket}")

        except (S3Error, ValueError, OSError) as e:
            logger.error(f"Failed to initialize MinIO client: {e}")
            self._available = False
            self._client = None

    @property
    def name(self) -> str:
        return "minio"

    @property
    def is_available(self) -> bool:
        return self._available and self._client is not None

    async def save(
        self,
        key: str,
        data: bytes,
        content_type: str = "image/jpeg",
    ) -> StorageObject:
        if not self.is_available:
            raise RuntimeError("MinIO storage is not available")

        # The SDK is blocking; keep it off the event loop
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(
            None,
            lambda: self._client.put_object(
                self.bucket,
                key,
                BytesIO(data),
                len(data),
                content_type=content_type,
            ),
        )

        logger.debug(f"Saved file to MinIO: {key}")

        return StorageObject(
            key=key,
            filename=key.split("/")[-1],
            size=len(data),
            content_type=content_type,
            created_at=datetime.now().isoformat(),
            public_url=self.get_public_url(key),
        )

    async def load(self, key: str) -> bytes | None:
        if not self.is_available:
            return None

        def _read() -> bytes:
            response = self._client.get_object(self.bucket, key)
            try:
                return response.read()
            finally:
                response.close()
                response.release_conn()

        try:
            loop = asyncio.get_event_loop()
            return await loop.run_in_executor(None, _read)
        except S3Error as e:
            if e.code != "NoSuchKey":
                logger.error(f"Failed to load from MinIO: {e}")
            return None

    def get_public_url(self, key: str) -> str | None:
        """
        Permanent URL for a key.

        Uses the configured public prefix, otherwise the bucket path on the
        MinIO endpoint itself. The URL is stored with the prompt row, so it
        must not expire.
        """
        if self._public_url:
            return f"{self._public_url.rstrip('/')}/{key}"

        if not self._endpoint:
            return None

        scheme = "https" if self.config.use_ssl else "http"
        return f"{scheme}://{self._endpoint}/{self.bucket}/{key}"
