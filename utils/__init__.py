"""
Utility functions for the Prompt Gallery.
"""
from .image_url import get_optimized_image_url

__all__ = [
    "get_optimized_image_url",
]
