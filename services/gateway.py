"""
Persistence gateway.

Pass-through facade over the prompt/tag repositories and object storage.
There is no transactional grouping between an upload and an insert.
"""

import logging

from core.exceptions import ExternalServiceError
from database.models import GenerationType, Prompt, Tag
from database.repositories import PromptRepository, TagRepository
from services.storage import StorageManager

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Create/list access to prompts and tags plus image uploads."""

    def __init__(
        self,
        prompt_repo: PromptRepository | None,
        tag_repo: TagRepository | None,
        storage: StorageManager,
    ):
        self._prompts = prompt_repo
        self._tags = tag_repo
        self._storage = storage

    @property
    def is_database_available(self) -> bool:
        return self._prompts is not None and self._tags is not None

    def _require_database(self) -> None:
        if not self.is_database_available:
            raise ExternalServiceError(message="Database not configured")

    async def list_prompts(self) -> list[Prompt]:
        """All prompts, newest first. Empty when the database is not configured."""
        if self._prompts is None:
            logger.warning("Database not configured, returning no prompts")
            return []
        return await self._prompts.list_all()

    async def list_tags(self) -> list[Tag]:
        """All tags by name. Empty when the database is not configured."""
        if self._tags is None:
            logger.warning("Database not configured, returning no tags")
            return []
        return await self._tags.list_all()

    async def insert_prompt(
        self,
        original_prompt: str,
        translated_prompt: str,
        summary: str,
        image_url: str | None,
        aspect_ratio: str,
        tags: list[str],
        generation_type: GenerationType,
    ) -> Prompt:
        self._require_database()
        return await self._prompts.create(
            original_prompt=original_prompt,
            translated_prompt=translated_prompt,
            summary=summary,
            image_url=image_url,
            aspect_ratio=aspect_ratio,
            tags=tags,
            generation_type=generation_type,
        )

    async def insert_tag(self, name: str) -> Tag:
        self._require_database()
        return await self._tags.create(name)

    async def upload_image(self, payload: bytes) -> str:
        """Store the payload and return its public URL."""
        return await self._storage.upload_image(payload)
