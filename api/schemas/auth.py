"""
Authentication-related Pydantic schemas.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Admin credentials."""

    email: str = Field(..., description="Admin email address")
    password: str = Field(..., description="Admin password")


class TokenResponse(BaseModel):
    """Session token response."""

    access_token: str = Field(..., description="JWT session token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    email: str = Field(..., description="Authenticated admin email")


class AuthStatusResponse(BaseModel):
    """Authentication status response."""

    authenticated: bool = Field(..., description="Whether a valid session is present")
    email: str | None = Field(None, description="Admin email if authenticated")


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool = Field(default=True)
    message: str = Field(default="Successfully logged out")
