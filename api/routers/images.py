"""
Image serving router.

Serves stored images when the storage backend has no public URL of its
own (e.g., local file system storage).
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from api.dependencies import get_storage
from core.exceptions import NotFoundError
from services.storage import StorageManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/images", tags=["images"])

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


@router.get("/{key:path}")
async def serve_image(
    key: str,
    storage: StorageManager = Depends(get_storage),
):
    """
    Serve an image from storage.

    Keys look like ``1718000000000-k3x9qz.jpg``.
    """
    data = await storage.load_image_bytes(key)

    if not data:
        raise NotFoundError(message="Image not found")

    suffix = key[key.rfind("."):].lower() if "." in key else ""
    content_type = CONTENT_TYPES.get(suffix, "application/octet-stream")

    filename = key.split("/")[-1]

    return Response(
        content=data,
        media_type=content_type,
        headers={
            "Cache-Control": "public, max-age=86400",  # 1 day cache
            "Content-Disposition": f'inline; filename="{filename}"',
        },
    )
