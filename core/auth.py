"""
Session-based authentication for the admin area.

Sessions are JWTs issued by the login endpoints and carried either in the
session cookie (browser pages) or an ``Authorization: Bearer`` header.
"""

import logging
from dataclasses import dataclass

from fastapi import Header, Request, Response

from .config import get_settings
from .exceptions import AuthenticationError
from .security import create_access_token, extract_token_from_header, verify_token

logger = logging.getLogger(__name__)


@dataclass
class AdminSession:
    """An authenticated admin session, built from a verified token."""

    email: str


def _token_from_request(request: Request, authorization: str | None) -> str | None:
    token = extract_token_from_header(authorization)
    if token:
        return token
    return request.cookies.get(get_settings().session_cookie_name)


# ============ FastAPI Dependencies ============


async def get_current_session(
    request: Request,
    authorization: str | None = Header(None),
) -> AdminSession | None:
    """
    Get the current session from the cookie or Authorization header.

    Returns None if there is no valid session.
    """
    token = _token_from_request(request, authorization)
    if not token:
        return None

    try:
        payload = verify_token(token)
    except AuthenticationError as e:
        logger.warning(f"Session verification failed: {e.details.get('error')}")
        return None

    email = payload.get("sub")
    if not email:
        return None
    return AdminSession(email=email)


async def require_session(
    request: Request,
    authorization: str | None = Header(None),
) -> AdminSession:
    """
    Require an authenticated session.

    Raises 401 if not authenticated.
    """
    session = await get_current_session(request, authorization)
    if not session:
        raise AuthenticationError(message="Authentication required")
    return session


# ============ Session Cookie ============


def issue_session_token(email: str) -> str:
    """Create a session token for the admin account."""
    return create_access_token({"sub": email.strip().lower()})


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token to a response as an HTTP-only cookie."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_hours * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(get_settings().session_cookie_name)
