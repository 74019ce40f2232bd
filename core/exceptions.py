"""
Custom exception classes for the application.

All exceptions inherit from AppException and include:
- error_code: Machine-readable error code
- message: Human-readable error message
- status_code: HTTP status code to return
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors."""

    error_code: str = "internal_error"
    message: str = "An unexpected error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result = {
            "code": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class AuthenticationError(AppException):
    """Raised when authentication fails."""

    error_code = "authentication_failed"
    message = "Authentication failed"
    status_code = 401


class NotFoundError(AppException):
    """Raised when a resource is not found."""

    error_code = "not_found"
    message = "Resource not found"
    status_code = 404


class ValidationError(AppException):
    """Raised when input validation fails."""

    error_code = "validation_error"
    message = "Invalid input"
    status_code = 422


class ImageProcessingError(ValidationError):
    """Raised when an uploaded image cannot be decoded."""

    error_code = "image_processing_failed"
    message = "Failed to load image"


class ExternalServiceError(AppException):
    """Raised when an external service fails or is not configured."""

    error_code = "external_service_error"
    message = "External service unavailable"
    status_code = 503


class AnalysisError(AppException):
    """Raised when the language model call fails."""

    error_code = "analysis_failed"
    message = "Analysis Failed"
    status_code = 500


class StorageError(AppException):
    """Raised when storage operation fails."""

    error_code = "storage_error"
    message = "Storage operation failed"
    status_code = 500
