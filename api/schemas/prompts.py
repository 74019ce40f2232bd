"""
Prompt gallery Pydantic schemas.
"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from database.models import GenerationType


class PromptEntryResponse(BaseModel):
    """A stored prompt entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    original_prompt: str = Field(..., description="Prompt text as entered (may be empty)")
    translated_prompt: str = Field(..., description="Counterpart-language translation")
    summary: str = Field(..., description="One-line visual summary")
    image_url: Optional[str] = Field(None, description="Public URL of the example image")
    aspect_ratio: str = Field(default="1:1", description="Bucketed aspect ratio")
    tags: List[str] = Field(default_factory=list)
    generation_type: GenerationType = GenerationType.TEXT_TO_IMAGE
    created_at: Optional[datetime] = None


class ListPromptsResponse(BaseModel):
    """Filtered prompt list."""

    prompts: List[PromptEntryResponse] = Field(default_factory=list)
    total: int = Field(default=0)


class TagResponse(BaseModel):
    """A category tag."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class ListTagsResponse(BaseModel):
    """All tags ordered by name."""

    tags: List[TagResponse] = Field(default_factory=list)


class CreateTagRequest(BaseModel):
    """Request to add a tag."""

    name: str = Field(..., min_length=1, max_length=100)


class CreateTagResponse(BaseModel):
    """Result of adding a tag."""

    tag: TagResponse
    created: bool = Field(..., description="False when a tag with the same name already existed")


class AnalyzeRequest(BaseModel):
    """Body of the analysis proxy request."""

    text: str = Field(..., description="Prompt text to translate and summarize")


class ImagePreviewResponse(BaseModel):
    """The downscaled JPEG an upload would be stored as."""

    preview_data_uri: str = Field(..., description="data:image/jpeg;base64,... of the stored rendition")
    aspect_ratio: str
    width: int
    height: int
