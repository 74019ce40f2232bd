"""
Prompt gallery entry model.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

ASPECT_RATIOS = ("1:1", "16:9", "4:3", "9:16", "3:4")


class GenerationType(str, Enum):
    """How the catalogued prompt is meant to be used."""

    TEXT_TO_IMAGE = "Text To Image"
    IMAGE_TO_IMAGE = "Image To Image"


class Prompt(Base):
    """
    A stored creative prompt.

    Rows are only ever created and listed. ``translated_prompt`` and
    ``summary`` are derived once at creation time.
    """

    __tablename__ = "prompts"

    # Primary key
    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )

    # Content
    original_prompt: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    translated_prompt: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    summary: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    # Image
    image_url: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    aspect_ratio: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="1:1",
    )

    # Classification
    tags: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)),
        nullable=False,
        default=list,
    )
    generation_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=GenerationType.TEXT_TO_IMAGE.value,
    )

    # Timestamp
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Prompt(id={self.id}, summary={self.summary[:30]}...)>"


# Indexes
Index("idx_prompts_created_at", Prompt.created_at.desc())
Index("idx_prompts_tags", Prompt.tags, postgresql_using="gin")
