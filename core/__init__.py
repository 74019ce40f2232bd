"""
Core modules for the Prompt Gallery API.

This package contains fundamental utilities used across the application:
- config: Application settings and configuration
- security: Session token handling and admin credential checks
- auth: Session dependencies for FastAPI routes
- exceptions: Custom exception classes
"""

from .config import Settings, get_settings
from .exceptions import (
    AnalysisError,
    AppException,
    AuthenticationError,
    ExternalServiceError,
    ImageProcessingError,
    NotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    # Config
    "get_settings",
    "Settings",
    # Exceptions
    "AppException",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "ImageProcessingError",
    "ExternalServiceError",
    "AnalysisError",
    "StorageError",
]
