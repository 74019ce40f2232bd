"""
Tag API router.

Endpoints:
- GET /api/tags - List tags
- POST /api/tags - Add a tag (admin session)
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_entry_service, get_gateway
from api.schemas.prompts import (
    CreateTagRequest,
    CreateTagResponse,
    ListTagsResponse,
    TagResponse,
)
from core.auth import AdminSession, require_session
from services.entry_service import EntryService
from services.gateway import PersistenceGateway

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> ListTagsResponse:
    tags = await gateway.list_tags()
    return ListTagsResponse(tags=[TagResponse.model_validate(t) for t in tags])


@router.post("", response_model=CreateTagResponse)
async def create_tag(
    request: CreateTagRequest,
    response: Response,
    session: AdminSession = Depends(require_session),
    service: EntryService = Depends(get_entry_service),
) -> CreateTagResponse:
    """Add a tag; an existing tag with the same name (ignoring case) is returned instead."""
    tag, created = await service.add_tag(request.name)
    response.status_code = 201 if created else 200
    return CreateTagResponse(tag=TagResponse.model_validate(tag), created=created)
