"""
Repository layer for database access.

Provides async create/list operations for prompts and tags.
"""

from .prompt_repo import PromptRepository
from .tag_repo import TagRepository

__all__ = [
    "PromptRepository",
    "TagRepository",
]
