"""
Pydantic schemas for API request/response models.
"""

from .common import (
    HealthStatus,
    HealthCheckResponse,
    DetailedHealthCheckResponse,
    ComponentHealth,
)

from .auth import (
    LoginRequest,
    TokenResponse,
    AuthStatusResponse,
    LogoutResponse,
)

from .prompts import (
    PromptEntryResponse,
    ListPromptsResponse,
    TagResponse,
    ListTagsResponse,
    CreateTagRequest,
    CreateTagResponse,
    AnalyzeRequest,
    ImagePreviewResponse,
)

__all__ = [
    # Common
    "HealthStatus",
    "HealthCheckResponse",
    "DetailedHealthCheckResponse",
    "ComponentHealth",
    # Auth
    "LoginRequest",
    "TokenResponse",
    "AuthStatusResponse",
    "LogoutResponse",
    # Prompts
    "PromptEntryResponse",
    "ListPromptsResponse",
    "TagResponse",
    "ListTagsResponse",
    "CreateTagRequest",
    "CreateTagResponse",
    "AnalyzeRequest",
    "ImagePreviewResponse",
]
