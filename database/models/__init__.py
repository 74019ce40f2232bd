"""
SQLAlchemy models for the Prompt Gallery.
"""

from .base import Base
from .prompt import ASPECT_RATIOS, GenerationType, Prompt
from .tag import Tag

__all__ = [
    # Base
    "Base",
    # Models
    "Prompt",
    "Tag",
    # Enums / constants
    "GenerationType",
    "ASPECT_RATIOS",
]
