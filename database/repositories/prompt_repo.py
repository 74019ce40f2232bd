"""
Prompt repository for gallery entry operations.
"""

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import GenerationType, Prompt


class PromptRepository:
    """Repository for Prompt model operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[Prompt]:
        """List every prompt, newest first."""
        query = select(Prompt).order_by(desc(Prompt.created_at))
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        original_prompt: str,
        translated_prompt: str,
        summary: str,
        image_url: str | None = None,
        aspect_ratio: str = "1:1",
        tags: list[str] | None = None,
        generation_type: GenerationType | str = GenerationType.TEXT_TO_IMAGE,
    ) -> Prompt:
        """Create a new prompt. ``id`` and ``created_at`` are assigned by the database."""
        prompt = Prompt(
            original_prompt=original_prompt,
            translated_prompt=translated_prompt,
            summary=summary,
            image_url=image_url,
            aspect_ratio=aspect_ratio,
            tags=list(tags or []),
            generation_type=GenerationType(generation_type).value,
        )
        self.session.add(prompt)
        try:
            await self.session.flush()
        except SQLAlchemyError:
            # Keep the request session usable for callers that report the error
            await self.session.rollback()
            raise
        await self.session.refresh(prompt)
        return prompt
