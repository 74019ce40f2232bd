"""
Entry composition for the admin area.

Combines the image preprocessor, the prompt analyzer and the persistence
gateway into the "add prompt" and "add tag" operations. Nothing is written
until preprocessing and analysis have both finished.
"""

import logging

from core.exceptions import ValidationError
from database.models import GenerationType, Prompt, Tag
from services.analyzer import AnalysisResult, PromptAnalyzer, pick_translation
from services.gateway import PersistenceGateway
from services.image_preprocessor import ProcessedImage, preprocess_image

logger = logging.getLogger(__name__)

IMAGE_ONLY_SUMMARY = "Image-based prompt"
DEFAULT_ASPECT_RATIO = "1:1"
MAX_TAG_LENGTH = 100


def _check_tag_length(name: str) -> None:
    if len(name) > MAX_TAG_LENGTH:
        raise ValidationError(
            message=f"Tag names must be at most {MAX_TAG_LENGTH} characters",
            details={"tag": name[:MAX_TAG_LENGTH] + "..."},
        )


class EntryService:
    """Creates prompt entries and tags."""

    def __init__(self, gateway: PersistenceGateway, analyzer: PromptAnalyzer):
        self._gateway = gateway
        self._analyzer = analyzer

    async def add_entry(
        self,
        text: str = "",
        image_bytes: bytes | None = None,
        tags: list[str] | None = None,
        generation_type: GenerationType = GenerationType.TEXT_TO_IMAGE,
    ) -> Prompt:
        """
        Validate, preprocess, analyze, upload and insert one entry.

        Raises:
            ValidationError: Neither text nor image supplied, or a tag is too long
            ImageProcessingError: The image could not be decoded
            StorageError: The upload failed (nothing is inserted)
            ExternalServiceError: The database is not configured
        """
        text = text or ""
        has_text = bool(text.strip())

        if not has_text and not image_bytes:
            raise ValidationError(message="Either prompt text or an image is required")

        tags = list(tags or [])
        for tag in tags:
            _check_tag_length(tag)

        processed: ProcessedImage | None = None
        if image_bytes:
            processed = preprocess_image(image_bytes)

        if has_text:
            analysis = await self._analyzer.analyze(text)
        else:
            analysis = AnalysisResult(cn=text, en=text, summary=IMAGE_ONLY_SUMMARY)

        image_url = None
        if processed is not None:
            image_url = await self._gateway.upload_image(processed.payload)

        try:
            prompt = await self._gateway.insert_prompt(
                original_prompt=text,
                translated_prompt=pick_translation(text, analysis),
                summary=analysis.summary,
                image_url=image_url,
                aspect_ratio=processed.aspect_ratio if processed else DEFAULT_ASPECT_RATIO,
                tags=tags,
                generation_type=generation_type,
            )
        except Exception:
            if image_url:
                logger.warning(f"Insert failed after upload, orphaned image left at {image_url}")
            raise

        logger.info(f"Created prompt {prompt.id} (image={'yes' if image_url else 'no'})")
        return prompt

    async def add_tag(self, name: str) -> tuple[Tag, bool]:
        """
        Create a tag unless one with the same name (ignoring case) exists.

        The check and the insert are separate calls, so two concurrent
        requests for the same name can both insert.

        Returns:
            (tag, created)
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError(message="Tag name is required")
        _check_tag_length(name)

        for tag in await self._gateway.list_tags():
            if tag.name.lower() == name.lower():
                return tag, False

        tag = await self._gateway.insert_tag(name)
        logger.info(f"Created tag {name!r}")
        return tag, True
