"""
Integration tests for the prompt and tag JSON endpoints.
"""

import pytest

from api.dependencies import get_gateway
from services.analyzer import AnalysisResult


class TestListPrompts:
    """Tests for GET /api/prompts."""

    def test_empty(self, client):
        response = client.get("/api/prompts")

        assert response.status_code == 200
        assert response.json() == {"prompts": [], "total": 0}

    def test_newest_first_and_filtered(self, client, fake_gateway, prompt_factory):
        old = prompt_factory(original_prompt="old cat", tags=["Animals"], age_minutes=10)
        new = prompt_factory(original_prompt="new cat", tags=["Animals"], age_minutes=1)
        other = prompt_factory(original_prompt="city", tags=["Night"], age_minutes=5)
        fake_gateway.prompts = [old, other, new]

        data = client.get("/api/prompts").json()
        assert [p["original_prompt"] for p in data["prompts"]] == ["new cat", "city", "old cat"]

        data = client.get("/api/prompts", params={"category": "Animals", "q": "CAT"}).json()
        assert data["total"] == 2
        assert {p["id"] for p in data["prompts"]} == {str(old.id), str(new.id)}

    def test_without_database(self, app, client):
        app.dependency_overrides.pop(get_gateway)

        response = client.get("/api/prompts")

        assert response.status_code == 200
        assert response.json()["total"] == 0


class TestCreatePrompt:
    """Tests for POST /api/prompts."""

    def test_requires_session(self, client, fake_gateway):
        response = client.post("/api/prompts", data={"text": "a cat"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "authentication_failed"
        assert fake_gateway.prompts == []

    def test_chinese_text(self, client, auth_headers, fake_analyzer):
        fake_analyzer.result = AnalysisResult(cn="一只猫", en="a cat", summary="一只猫")

        response = client.post(
            "/api/prompts",
            data={"text": "一只猫", "tags": ["Animals"]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["original_prompt"] == "一只猫"
        assert data["translated_prompt"] == "a cat"
        assert data["image_url"] is None
        assert data["aspect_ratio"] == "1:1"
        assert data["tags"] == ["Animals"]
        assert data["generation_type"] == "Text To Image"

    def test_with_image(self, client, auth_headers, image_bytes):
        response = client.post(
            "/api/prompts",
            data={"text": "portrait", "generation_type": "Image To Image"},
            files={"image": ("tall.jpg", image_bytes(900, 1600, fmt="JPEG"), "image/jpeg")},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["aspect_ratio"] == "9:16"
        assert data["image_url"].endswith(".jpg")

    def test_bad_image(self, client, auth_headers, fake_gateway):
        response = client.post(
            "/api/prompts",
            data={"text": "a cat"},
            files={"image": ("cat.png", b"not an image", "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "image_processing_failed"
        assert fake_gateway.uploads == []

    def test_nothing_to_save(self, client, auth_headers):
        response = client.post("/api/prompts", data={"text": "  "}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_upload_failure(self, client, auth_headers, fake_gateway, image_bytes):
        fake_gateway.fail_upload = True

        response = client.post(
            "/api/prompts",
            data={"text": "a cat"},
            files={"image": ("cat.png", image_bytes(50, 50), "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "storage_error"
        assert fake_gateway.prompts == []

    def test_without_database(self, app, client, auth_headers):
        app.dependency_overrides.pop(get_gateway)

        response = client.post("/api/prompts", data={"text": "a cat"}, headers=auth_headers)

        assert response.status_code == 503
        assert response.json()["error"]["message"] == "Database not configured"


class TestImagePreview:
    """Tests for POST /api/prompts/preview."""

    def test_returns_downscaled_preview(self, client, auth_headers, fake_gateway, image_bytes):
        response = client.post(
            "/api/prompts/preview",
            files={"image": ("wide.png", image_bytes(1600, 900), "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["preview_data_uri"].startswith("data:image/jpeg;base64,")
        assert data["aspect_ratio"] == "16:9"
        assert (data["width"], data["height"]) == (800, 450)
        assert fake_gateway.uploads == []

    def test_undecodable_image(self, client, auth_headers):
        response = client.post(
            "/api/prompts/preview",
            files={"image": ("cat.png", b"not an image", "image/png")},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "image_processing_failed"

    def test_requires_session(self, client, image_bytes):
        response = client.post(
            "/api/prompts/preview",
            files={"image": ("cat.png", image_bytes(10, 10), "image/png")},
        )

        assert response.status_code == 401


class TestTags:
    """Tests for /api/tags."""

    def test_list(self, client, fake_gateway, tag_factory):
        fake_gateway.tags = [tag_factory("Night"), tag_factory("Animals")]

        response = client.get("/api/tags")

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["tags"]] == ["Animals", "Night"]

    def test_create_then_duplicate(self, client, auth_headers, fake_gateway):
        first = client.post("/api/tags", json={"name": "Animals"}, headers=auth_headers)
        second = client.post("/api/tags", json={"name": "animals"}, headers=auth_headers)

        assert first.status_code == 201
        assert first.json()["created"] is True
        assert second.status_code == 200
        assert second.json()["created"] is False
        assert second.json()["tag"]["id"] == first.json()["tag"]["id"]
        assert len(fake_gateway.tags) == 1

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}])
    def test_invalid_name(self, client, auth_headers, body):
        response = client.post("/api/tags", json=body, headers=auth_headers)

        assert response.status_code == 422

    def test_requires_session(self, client):
        response = client.post("/api/tags", json={"name": "Animals"})

        assert response.status_code == 401
