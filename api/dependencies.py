"""
FastAPI dependency injection for database sessions, repositories and services.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_session, is_database_available
from database.repositories import PromptRepository, TagRepository
from services.analyzer import PromptAnalyzer, get_prompt_analyzer
from services.entry_service import EntryService
from services.gateway import PersistenceGateway
from services.gemini_analysis import GeminiAnalysisService, get_analysis_service
from services.storage import StorageManager, get_storage_manager

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncGenerator[AsyncSession | None, None]:
    """
    Get database session dependency.

    Returns None if database is not configured/available.
    """
    if not is_database_available():
        yield None
        return

    async for session in get_session():
        yield session


async def get_prompt_repository(
    session: AsyncSession | None = Depends(get_db_session),
) -> PromptRepository | None:
    """Get PromptRepository dependency."""
    if session is None:
        return None
    return PromptRepository(session)


async def get_tag_repository(
    session: AsyncSession | None = Depends(get_db_session),
) -> TagRepository | None:
    """Get TagRepository dependency."""
    if session is None:
        return None
    return TagRepository(session)


def get_storage() -> StorageManager:
    """Get the shared storage manager."""
    return get_storage_manager()


def get_analyzer() -> PromptAnalyzer:
    """Get the analysis proxy client."""
    return get_prompt_analyzer()


def get_gemini_service() -> GeminiAnalysisService:
    """Get the Gemini analysis service."""
    return get_analysis_service()


async def get_gateway(
    prompt_repo: PromptRepository | None = Depends(get_prompt_repository),
    tag_repo: TagRepository | None = Depends(get_tag_repository),
    storage: StorageManager = Depends(get_storage),
) -> PersistenceGateway:
    """Get the persistence gateway for the current request."""
    return PersistenceGateway(prompt_repo, tag_repo, storage)


async def get_entry_service(
    gateway: PersistenceGateway = Depends(get_gateway),
    analyzer: PromptAnalyzer = Depends(get_analyzer),
) -> EntryService:
    """Get the entry composition service."""
    return EntryService(gateway, analyzer)
