"""
API routers for different endpoints.
"""

from .health import router as health_router
from .auth import router as auth_router
from .analyze import router as analyze_router
from .prompts import router as prompts_router
from .tags import router as tags_router
from .images import router as images_router
from .pages import router as pages_router

__all__ = [
    "health_router",
    "auth_router",
    "analyze_router",
    "prompts_router",
    "tags_router",
    "images_router",
    "pages_router",
]
