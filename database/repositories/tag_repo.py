"""
Tag repository.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Tag


class TagRepository:
    """Repository for Tag model operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[Tag]:
        """List every tag ordered by name."""
        result = await self.session.execute(select(Tag).order_by(Tag.name.asc()))
        return list(result.scalars().all())

    async def create(self, name: str) -> Tag:
        """Insert a tag. Callers check for existing names first."""
        tag = Tag(name=name)
        self.session.add(tag)
        try:
            await self.session.flush()
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return tag
