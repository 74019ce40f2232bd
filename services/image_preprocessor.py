"""
Image preprocessing for uploaded prompt images.

Every upload is classified into a coarse aspect bucket, scaled down so its
larger side is at most ``max_dim`` pixels and re-encoded as JPEG. The result
carries both a data URI for previews and the raw bytes for storage.
"""

import base64
import logging
from dataclasses import dataclass
from io import BytesIO

from PIL import Image, ImageOps, UnidentifiedImageError

from core.config import get_settings
from core.exceptions import ImageProcessingError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DIMENSION = 800
DEFAULT_JPEG_QUALITY = 70


@dataclass
class ProcessedImage:
    """Output of the preprocessor."""

    preview_data_uri: str
    payload: bytes
    aspect_ratio: str
    width: int
    height: int


def bucket_aspect_ratio(width: float, height: float) -> str:
    """
    Classify width/height into one of the five aspect buckets.

    Thresholds are checked in order and are inclusive; ratios in the gap
    between 0.8 and 1.3 fall back to square.
    """
    r = width / height
    if r >= 1.7:
        return "16:9"
    if r >= 1.3:
        return "4:3"
    if r <= 0.6:
        return "9:16"
    if r <= 0.8:
        return "3:4"
    return "1:1"


def compute_target_size(
    width: float,
    height: float,
    max_dim: int = DEFAULT_MAX_DIMENSION,
) -> tuple[float, float]:
    """
    Scale (width, height) so the larger side is at most ``max_dim``.

    Images already within bounds are returned unchanged.
    """
    if width <= max_dim and height <= max_dim:
        return width, height

    if width > height:
        return float(max_dim), height / width * max_dim
    return width / height * max_dim, float(max_dim)


def _to_pixels(value: float) -> int:
    return max(1, round(value))


def preprocess_image(
    data: bytes,
    max_dim: int | None = None,
    quality: int | None = None,
) -> ProcessedImage:
    """
    Decode, bucket, downscale and JPEG-encode an uploaded image.

    Args:
        data: Raw bytes of the uploaded file
        max_dim: Bound for the larger side (defaults to settings)
        quality: JPEG quality 1-95 (defaults to settings)

    Returns:
        ProcessedImage with preview data URI, JPEG payload and aspect bucket

    Raises:
        ImageProcessingError: If the bytes cannot be decoded as an image
    """
    settings = get_settings()
    max_dim = max_dim or settings.image_max_dimension
    quality = quality or settings.image_jpeg_quality

    try:
        with Image.open(BytesIO(data)) as source:
            source.load()
            image = ImageOps.exif_transpose(source)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        logger.warning(f"Failed to decode uploaded image: {e}")
        raise ImageProcessingError(details={"error": str(e)}) from e

    width, height = image.size
    aspect_ratio = bucket_aspect_ratio(width, height)

    target_w, target_h = compute_target_size(width, height, max_dim)
    size = (_to_pixels(target_w), _to_pixels(target_h))
    if size != (width, height):
        image = image.resize(size, Image.Resampling.LANCZOS)

    if image.mode != "RGB":
        image = image.convert("RGB")

    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=quality)
    payload = buffer.getvalue()

    preview = "data:image/jpeg;base64," + base64.b64encode(payload).decode()

    logger.debug(
        f"Preprocessed image {width}x{height} -> {size[0]}x{size[1]} "
        f"({aspect_ratio}, {len(payload)} bytes)"
    )

    return ProcessedImage(
        preview_data_uri=preview,
        payload=payload,
        aspect_ratio=aspect_ratio,
        width=size[0],
        height=size[1],
    )
