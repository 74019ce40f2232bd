"""
Tag model used as gallery categories.
"""

from uuid import UUID, uuid4

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Tag(Base):
    """
    A category name that prompts can be tagged with.

    Names are unique case-insensitively, but only by convention of the
    callers; there is no database constraint.
    """

    __tablename__ = "tags"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"
