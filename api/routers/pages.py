"""
Server-rendered pages.

Endpoints:
- GET /  - Public gallery with category tabs, search and a detail overlay
- GET/POST /login - Admin login form
- GET/POST /logout - End the admin session
- GET /admin - Entry creation form (session required)
- POST /admin/prompts - Create an entry from the form
- POST /admin/tags - Add a tag from the form
"""

import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_entry_service, get_gateway
from api.routers.prompts import read_upload
from core.auth import (
    AdminSession,
    clear_session_cookie,
    get_current_session,
    issue_session_token,
    set_session_cookie,
)
from core.exceptions import AppException, ValidationError
from core.security import verify_admin_credentials
from database.models import GenerationType
from services.entry_service import EntryService
from services.gallery import ALL_CATEGORY, filter_prompts, prompt_languages
from services.gateway import PersistenceGateway
from utils.image_url import get_optimized_image_url

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], include_in_schema=False)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["optimized_image_url"] = get_optimized_image_url

DETAIL_IMAGE_WIDTH = 1200
SAVE_FAILED_MESSAGE = "Failed to save prompt."


def _redirect(path: str, **params: str) -> RedirectResponse:
    query = urlencode({k: v for k, v in params.items() if v})
    url = f"{path}?{query}" if query else path
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


# ============ Gallery ============


@router.get("/", response_class=HTMLResponse)
async def gallery(
    request: Request,
    category: str = Query(ALL_CATEGORY),
    q: str = Query(""),
    selected: Optional[str] = Query(None),
    gateway: PersistenceGateway = Depends(get_gateway),
    session: AdminSession | None = Depends(get_current_session),
):
    """Render the gallery from one fetch of all prompts and tags."""
    prompts = await gateway.list_prompts()
    tags = await gateway.list_tags()

    visible = filter_prompts(prompts, category, q)

    detail = None
    if selected:
        detail = next((p for p in prompts if str(p.id) == selected), None)

    context = {
        "categories": [ALL_CATEGORY] + [t.name for t in tags],
        "category": category,
        "q": q,
        "prompts": visible,
        "total": len(visible),
        "detail": detail,
        "detail_languages": prompt_languages(detail.original_prompt) if detail else None,
        "detail_width": DETAIL_IMAGE_WIDTH,
        "is_admin": session is not None,
    }
    return templates.TemplateResponse(request, "gallery.html", context)


# ============ Login / Logout ============


@router.get("/login", response_class=HTMLResponse)
async def login_form(
    request: Request,
    session: AdminSession | None = Depends(get_current_session),
):
    if session is not None:
        return _redirect("/admin")
    return templates.TemplateResponse(request, "login.html", {"error": None, "email": ""})


@router.post("/login", response_class=HTMLResponse)
async def login_submit(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
):
    """Check the admin credentials and start a session."""
    if not verify_admin_credentials(email, password):
        logger.warning(f"Failed admin login for {email!r}")
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": "Invalid email or password", "email": email},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    response = _redirect("/admin")
    set_session_cookie(response, issue_session_token(email))
    logger.info(f"Admin logged in: {email}")
    return response


@router.api_route("/logout", methods=["GET", "POST"])
async def logout():
    response = _redirect("/")
    clear_session_cookie(response)
    return response


# ============ Admin ============


@router.get("/admin", response_class=HTMLResponse)
async def admin_page(
    request: Request,
    message: str = Query(""),
    error: str = Query(""),
    session: AdminSession | None = Depends(get_current_session),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Render the entry creation form, or send the visitor to the login page."""
    if session is None:
        return _redirect("/login")

    context = {
        "email": session.email,
        "tags": await gateway.list_tags(),
        "generation_types": list(GenerationType),
        "message": message,
        "error": error,
    }
    return templates.TemplateResponse(request, "admin.html", context)


@router.post("/admin/prompts")
async def admin_create_prompt(
    text: str = Form(""),
    tags: Optional[List[str]] = Form(None),
    generation_type: GenerationType = Form(GenerationType.TEXT_TO_IMAGE),
    image: Optional[UploadFile] = File(None),
    session: AdminSession | None = Depends(get_current_session),
    service: EntryService = Depends(get_entry_service),
):
    """Create an entry; every failure is reported with one generic message."""
    if session is None:
        return _redirect("/login")

    try:
        image_bytes = await read_upload(image)
        await service.add_entry(
            text=text,
            image_bytes=image_bytes,
            tags=tags or [],
            generation_type=generation_type,
        )
    except AppException as e:
        logger.error(f"Failed to save prompt: {e.error_code} - {e.message}")
        return _redirect("/admin", error=SAVE_FAILED_MESSAGE)
    except SQLAlchemyError as e:
        logger.exception(f"Database error while saving prompt: {e}")
        return _redirect("/admin", error=SAVE_FAILED_MESSAGE)

    return _redirect("/admin", message="Prompt saved.")


@router.post("/admin/tags")
async def admin_create_tag(
    name: str = Form(""),
    session: AdminSession | None = Depends(get_current_session),
    service: EntryService = Depends(get_entry_service),
):
    if session is None:
        return _redirect("/login")

    try:
        tag, created = await service.add_tag(name)
    except ValidationError as e:
        return _redirect("/admin", error=e.message)
    except AppException as e:
        logger.error(f"Failed to add tag {name!r}: {e.message}")
        return _redirect("/admin", error="Failed to add tag.")
    except SQLAlchemyError as e:
        logger.exception(f"Database error while adding tag {name!r}: {e}")
        return _redirect("/admin", error="Failed to add tag.")

    if created:
        return _redirect("/admin", message=f"Tag '{tag.name}' added.")
    return _redirect("/admin", message=f"Tag '{tag.name}' already exists.")
