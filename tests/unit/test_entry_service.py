"""
Unit tests for entry composition.
"""

from io import BytesIO

import pytest
from PIL import Image

from core.exceptions import (
    ExternalServiceError,
    ImageProcessingError,
    StorageError,
    ValidationError,
)
from database.models import GenerationType
from services.analyzer import AnalysisResult
from services.entry_service import EntryService


@pytest.fixture
def service(fake_gateway, fake_analyzer) -> EntryService:
    return EntryService(fake_gateway, fake_analyzer)


class TestAddEntry:
    """Tests for EntryService.add_entry."""

    @pytest.mark.asyncio
    async def test_chinese_text_only(self, service, fake_gateway, fake_analyzer):
        fake_analyzer.result = AnalysisResult(cn="一只猫", en="a cat", summary="一只猫")

        prompt = await service.add_entry(text="一只猫", tags=["Animals"])

        assert prompt.original_prompt == "一只猫"
        assert prompt.translated_prompt == "a cat"
        assert prompt.summary == "一只猫"
        assert prompt.image_url is None
        assert prompt.aspect_ratio == "1:1"
        assert prompt.tags == ["Animals"]
        assert prompt.generation_type == GenerationType.TEXT_TO_IMAGE.value
        assert fake_gateway.uploads == []
        assert fake_analyzer.calls == ["一只猫"]

    @pytest.mark.asyncio
    async def test_english_text_stores_chinese_translation(self, service, fake_analyzer):
        fake_analyzer.result = AnalysisResult(cn="一只猫", en="a cat", summary="一只猫")

        prompt = await service.add_entry(text="a cat")

        assert prompt.translated_prompt == "一只猫"

    @pytest.mark.asyncio
    async def test_image_only(self, service, fake_gateway, fake_analyzer, image_bytes):
        prompt = await service.add_entry(
            image_bytes=image_bytes(1600, 900),
            generation_type=GenerationType.IMAGE_TO_IMAGE,
        )

        assert prompt.original_prompt == ""
        assert prompt.translated_prompt == ""
        assert prompt.summary == "Image-based prompt"
        assert prompt.aspect_ratio == "16:9"
        assert prompt.generation_type == GenerationType.IMAGE_TO_IMAGE.value
        assert prompt.image_url == "https://storage.example.com/prompts/1.jpg"
        assert fake_analyzer.calls == []

        uploaded = Image.open(BytesIO(fake_gateway.uploads[0]))
        assert uploaded.format == "JPEG"
        assert uploaded.size == (800, 450)

    @pytest.mark.asyncio
    async def test_text_and_image(self, service, fake_gateway, image_bytes):
        prompt = await service.add_entry(text="tall tower", image_bytes=image_bytes(600, 1200))

        assert prompt.aspect_ratio == "9:16"
        assert prompt.image_url is not None
        assert prompt.summary == "tall tower..."
        assert len(fake_gateway.uploads) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   "])
    async def test_nothing_to_save(self, service, fake_gateway, fake_analyzer, text):
        with pytest.raises(ValidationError):
            await service.add_entry(text=text)

        assert fake_gateway.prompts == []
        assert fake_analyzer.calls == []

    @pytest.mark.asyncio
    async def test_bad_image_aborts_before_analysis(self, service, fake_gateway, fake_analyzer):
        with pytest.raises(ImageProcessingError):
            await service.add_entry(text="a cat", image_bytes=b"garbage")

        assert fake_analyzer.calls == []
        assert fake_gateway.prompts == []

    @pytest.mark.asyncio
    async def test_upload_failure_skips_insert(self, service, fake_gateway, image_bytes):
        fake_gateway.fail_upload = True

        with pytest.raises(StorageError):
            await service.add_entry(text="a cat", image_bytes=image_bytes(100, 100))

        assert fake_gateway.prompts == []

    @pytest.mark.asyncio
    async def test_insert_failure_after_upload(self, service, fake_gateway, image_bytes, caplog):
        fake_gateway.fail_insert = True

        with pytest.raises(ExternalServiceError):
            await service.add_entry(text="a cat", image_bytes=image_bytes(100, 100))

        assert len(fake_gateway.uploads) == 1
        assert "orphaned image" in caplog.text

    @pytest.mark.asyncio
    async def test_overlong_tag_rejected_before_side_effects(self, service, fake_gateway, fake_analyzer):
        with pytest.raises(ValidationError):
            await service.add_entry(text="a cat", tags=["Animals", "y" * 101])

        assert fake_analyzer.calls == []
        assert fake_gateway.prompts == []


class TestAddTag:
    """Tests for EntryService.add_tag."""

    @pytest.mark.asyncio
    async def test_creates_new_tag(self, service, fake_gateway):
        tag, created = await service.add_tag("  Animals ")

        assert created is True
        assert tag.name == "Animals"
        assert [t.name for t in fake_gateway.tags] == ["Animals"]

    @pytest.mark.asyncio
    async def test_existing_tag_ignores_case(self, service, fake_gateway, tag_factory):
        fake_gateway.tags.append(tag_factory("Animals"))

        tag, created = await service.add_tag("animals")

        assert created is False
        assert tag.name == "Animals"
        assert len(fake_gateway.tags) == 1

    @pytest.mark.asyncio
    async def test_blank_name(self, service, fake_gateway):
        with pytest.raises(ValidationError):
            await service.add_tag("   ")

        assert fake_gateway.tags == []

    @pytest.mark.asyncio
    async def test_name_too_long(self, service, fake_gateway):
        with pytest.raises(ValidationError):
            await service.add_tag("x" * 101)

        assert fake_gateway.tags == []

    @pytest.mark.asyncio
    async def test_name_at_limit(self, service):
        tag, created = await service.add_tag("x" * 100)

        assert created is True
        assert len(tag.name) == 100
