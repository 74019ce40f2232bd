"""
Prompt gallery API router.

Endpoints:
- GET /api/prompts - List prompts, filtered by category and search query
- POST /api/prompts - Create a prompt entry (multipart, admin session)
- POST /api/prompts/preview - Preview the downscaled image an upload would store
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from api.dependencies import get_entry_service, get_gateway
from api.schemas.prompts import ImagePreviewResponse, ListPromptsResponse, PromptEntryResponse
from core.auth import AdminSession, require_session
from core.config import get_settings
from core.exceptions import ValidationError
from database.models import GenerationType
from services.entry_service import EntryService
from services.gallery import ALL_CATEGORY, filter_prompts
from services.gateway import PersistenceGateway
from services.image_preprocessor import preprocess_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


async def read_upload(image: UploadFile | None) -> bytes | None:
    """Read an uploaded image, enforcing the configured size limit."""
    if image is None or not image.filename:
        return None

    data = await image.read()
    if not data:
        return None

    max_bytes = get_settings().image_max_upload_bytes
    if len(data) > max_bytes:
        raise ValidationError(
            message="Image is too large",
            details={"size": len(data), "max_size": max_bytes},
        )
    return data


@router.get("", response_model=ListPromptsResponse)
async def list_prompts(
    category: str = Query(ALL_CATEGORY, description="Tag name or 'All'"),
    q: str = Query("", description="Case-insensitive search text"),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> ListPromptsResponse:
    """List gallery entries, newest first."""
    prompts = filter_prompts(await gateway.list_prompts(), category, q)
    return ListPromptsResponse(
        prompts=[PromptEntryResponse.model_validate(p) for p in prompts],
        total=len(prompts),
    )


@router.post("", response_model=PromptEntryResponse, status_code=201)
async def create_prompt(
    text: str = Form(""),
    tags: Optional[List[str]] = Form(None),
    generation_type: GenerationType = Form(GenerationType.TEXT_TO_IMAGE),
    image: Optional[UploadFile] = File(None),
    session: AdminSession = Depends(require_session),
    service: EntryService = Depends(get_entry_service),
) -> PromptEntryResponse:
    """
    Create a prompt entry.

    The text is translated and summarized, and the optional image is
    downscaled and stored before the entry is inserted.
    """
    image_bytes = await read_upload(image)
    prompt = await service.add_entry(
        text=text,
        image_bytes=image_bytes,
        tags=tags or [],
        generation_type=generation_type,
    )
    logger.info(f"Prompt {prompt.id} created by {session.email}")
    return PromptEntryResponse.model_validate(prompt)


@router.post("/preview", response_model=ImagePreviewResponse)
async def preview_image(
    image: UploadFile = File(...),
    session: AdminSession = Depends(require_session),
) -> ImagePreviewResponse:
    """Preprocess an image without storing it, for the admin form preview."""
    image_bytes = await read_upload(image)
    if image_bytes is None:
        raise ValidationError(message="An image file is required")

    processed = preprocess_image(image_bytes)
    return ImagePreviewResponse(
        preview_data_uri=processed.preview_data_uri,
        aspect_ratio=processed.aspect_ratio,
        width=processed.width,
        height=processed.height,
    )
