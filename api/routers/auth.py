"""
Authentication router for the admin session.

Endpoints:
- POST /api/auth/login - Exchange admin credentials for a session
- POST /api/auth/logout - End the session
- GET /api/auth/status - Report whether a session is active
"""

import logging

from fastapi import APIRouter, Depends, Response

from api.schemas.auth import (
    AuthStatusResponse,
    LoginRequest,
    LogoutResponse,
    TokenResponse,
)
from core.auth import (
    AdminSession,
    clear_session_cookie,
    get_current_session,
    issue_session_token,
    set_session_cookie,
)
from core.config import get_settings
from core.exceptions import AuthenticationError
from core.security import verify_admin_credentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, response: Response) -> TokenResponse:
    """
    Log in with the configured admin account.

    The session token is returned in the body and set as an HTTP-only cookie.
    """
    if not verify_admin_credentials(request.email, request.password):
        logger.warning(f"Failed admin login for {request.email!r}")
        raise AuthenticationError(message="Invalid email or password")

    token = issue_session_token(request.email)
    set_session_cookie(response, token)

    logger.info(f"Admin logged in: {request.email}")
    return TokenResponse(
        access_token=token,
        expires_in=get_settings().session_expire_hours * 3600,
        email=request.email.strip().lower(),
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """
    Logout the admin.

    Tokens are stateless, so this only clears the cookie.
    """
    clear_session_cookie(response)
    return LogoutResponse()


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(
    session: AdminSession | None = Depends(get_current_session),
) -> AuthStatusResponse:
    if session is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, email=session.email)
