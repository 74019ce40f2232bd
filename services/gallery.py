"""
Gallery filtering and display helpers.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from services.analyzer import contains_chinese

ALL_CATEGORY = "All"


class _Filterable(Protocol):
    original_prompt: str
    translated_prompt: str
    summary: str
    tags: Sequence[str]


T = TypeVar("T", bound=_Filterable)


def matches_entry(entry: _Filterable, category: str = ALL_CATEGORY, query: str = "") -> bool:
    """Category must be "All" or one of the tags; query is a case-insensitive substring."""
    if category != ALL_CATEGORY and category not in (entry.tags or []):
        return False

    needle = (query or "").lower()
    return (
        needle in (entry.original_prompt or "").lower()
        or needle in (entry.translated_prompt or "").lower()
        or needle in (entry.summary or "").lower()
    )


def filter_prompts(prompts: Iterable[T], category: str = ALL_CATEGORY, query: str = "") -> list[T]:
    """Recompute the visible entries from the full in-memory list."""
    return [p for p in prompts if matches_entry(p, category, query)]


def prompt_languages(original_prompt: str) -> tuple[str, str]:
    """Labels for the (original, translated) prompt boxes in the detail overlay."""
    if contains_chinese(original_prompt or ""):
        return "Chinese", "English"
    return "English", "Chinese"
