"""
Pytest configuration and fixtures.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from io import BytesIO
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "testing"
os.environ["DEBUG"] = "true"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "correct-horse-battery"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["STORAGE_LOCAL_PATH"] = tempfile.mkdtemp(prefix="prompt-gallery-tests-")
for _name in ("DATABASE_URL", "GEMINI_API_KEY", "GOOGLE_API_KEY", "STORAGE_PUBLIC_URL"):
    os.environ.pop(_name, None)

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"


# ============ Fakes ============


class FakeGateway:
    """In-memory stand-in for PersistenceGateway."""

    def __init__(self, prompts=None, tags=None):
        self.prompts = list(prompts or [])
        self.tags = list(tags or [])
        self.uploads: list[bytes] = []
        self.fail_upload = False
        self.fail_insert = False

    async def list_prompts(self):
        return sorted(self.prompts, key=lambda p: p.created_at, reverse=True)

    async def list_tags(self):
        return sorted(self.tags, key=lambda t: t.name)

    async def insert_prompt(self, **fields):
        from core.exceptions import ExternalServiceError
        from database.models import Prompt

        if self.fail_insert:
            raise ExternalServiceError(message="Database not configured")

        prompt = Prompt(
            id=uuid4(),
            created_at=datetime.now(timezone.utc),
            **{**fields, "generation_type": fields["generation_type"].value},
        )
        self.prompts.append(prompt)
        return prompt

    async def insert_tag(self, name: str):
        from database.models import Tag

        tag = Tag(id=uuid4(), name=name)
        self.tags.append(tag)
        return tag

    async def upload_image(self, payload: bytes) -> str:
        from core.exceptions import StorageError

        if self.fail_upload:
            raise StorageError(details={"error": "bucket unavailable"})
        self.uploads.append(payload)
        return f"https://storage.example.com/prompts/{len(self.uploads)}.jpg"


class FakeAnalyzer:
    """Analyzer returning canned results and recording calls."""

    def __init__(self, result=None):
        self.result = result
        self.calls: list[str] = []

    async def analyze(self, text: str):
        from services.analyzer import AnalysisResult

        self.calls.append(text)
        if self.result is not None:
            return self.result
        return AnalysisResult.fallback(text)


def make_prompt(
    original_prompt: str = "a red fox in the snow",
    translated_prompt: str = "雪中的红狐狸",
    summary: str = "雪地里的狐狸",
    tags=None,
    image_url=None,
    aspect_ratio: str = "1:1",
    age_minutes: int = 0,
):
    """Build a transient Prompt row."""
    from database.models import GenerationType, Prompt

    return Prompt(
        id=uuid4(),
        original_prompt=original_prompt,
        translated_prompt=translated_prompt,
        summary=summary,
        image_url=image_url,
        aspect_ratio=aspect_ratio,
        tags=list(tags or []),
        generation_type=GenerationType.TEXT_TO_IMAGE.value,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=age_minutes),
    )


def make_tag(name: str):
    from database.models import Tag

    return Tag(id=uuid4(), name=name)


def make_image_bytes(width: int, height: int, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    """Encode a solid-colour image of the given size."""
    from PIL import Image

    buffer = BytesIO()
    color = (200, 40, 40, 255) if mode == "RGBA" else (200, 40, 40)
    Image.new(mode, (width, height), color=color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


# ============ App Fixtures ============


@pytest.fixture
def app(fake_gateway, fake_analyzer):
    """Application with the gateway and analyzer replaced by fakes."""
    from api.dependencies import get_analyzer, get_gateway
    from api.main import app

    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_analyzer] = lambda: fake_analyzer
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Synchronous test client."""
    return TestClient(app)


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Asynchronous test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def session_token() -> str:
    from core.auth import issue_session_token

    return issue_session_token(ADMIN_EMAIL)


@pytest.fixture
def admin_client(client, session_token) -> TestClient:
    """Test client carrying an admin session cookie."""
    client.cookies.set("session", session_token)
    return client


@pytest.fixture
def auth_headers(session_token):
    """Bearer authentication headers for JSON endpoints."""
    return {"Authorization": f"Bearer {session_token}"}


# ============ Test Settings ============


@pytest.fixture
def test_settings(monkeypatch):
    """Clear cached settings around a test that changes the environment."""
    from core.config import get_settings

    get_settings.cache_clear()

    yield monkeypatch

    get_settings.cache_clear()


# ============ Test Data Fixtures ============


@pytest.fixture
def prompt_factory():
    return make_prompt


@pytest.fixture
def tag_factory():
    return make_tag


@pytest.fixture
def image_bytes():
    return make_image_bytes
