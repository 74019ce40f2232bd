"""
Prompt analyzer client.

Sends prompt text to the ``/api/analyze`` proxy and returns the bilingual
translation plus summary. Any failure of the call degrades to a local
fallback so saving a prompt never depends on the language model.
"""

import logging
import re
from dataclasses import asdict, dataclass

import httpx

from core.config import get_settings
from core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_CHINESE_RE = re.compile(r"[一-龥]")

FALLBACK_SUMMARY_LENGTH = 50


def contains_chinese(text: str) -> bool:
    """Return True if text contains Chinese characters."""
    return bool(_CHINESE_RE.search(text))


@dataclass
class AnalysisResult:
    """One language-model analysis of a prompt."""

    cn: str
    en: str
    summary: str

    @classmethod
    def fallback(cls, text: str) -> "AnalysisResult":
        """Result used when the analysis call is unavailable."""
        return cls(cn=text, en=text, summary=text[:FALLBACK_SUMMARY_LENGTH] + "...")

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def pick_translation(text: str, analysis: AnalysisResult) -> str:
    """Chinese input is stored with its English translation and vice versa."""
    return analysis.en if contains_chinese(text) else analysis.cn


class PromptAnalyzer:
    """Async client for the analysis proxy endpoint."""

    def __init__(
        self,
        endpoint_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._endpoint_url = endpoint_url or get_settings().analysis_endpoint_url
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Translate and summarize ``text``.

        Raises:
            ValidationError: If text is empty or whitespace only. Nothing is
                sent in that case.
        """
        if not text or not text.strip():
            raise ValidationError(message="Text is empty")

        client = await self._get_client()

        try:
            response = await client.post(self._endpoint_url, json={"text": text})
            if response.status_code >= 400:
                raise RuntimeError(self._extract_error(response))

            data = response.json()
            return AnalysisResult(
                cn=str(data["cn"]),
                en=str(data["en"]),
                summary=str(data["summary"]),
            )

        except (httpx.HTTPError, RuntimeError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"[PromptAnalyzer] Analysis unavailable, using fallback: {e}")
            return AnalysisResult.fallback(text)

    @staticmethod
    def _extract_error(response: httpx.Response) -> str:
        try:
            data = response.json()
            if isinstance(data, dict) and data.get("error"):
                return str(data["error"])
        except ValueError:
            pass
        return f"Server error: {response.status_code}"

    async def close(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None


# Singleton
_analyzer: PromptAnalyzer | None = None


def get_prompt_analyzer() -> PromptAnalyzer:
    """Get or create the singleton analyzer client."""
    global _analyzer
    if _analyzer is None:
        _analyzer = PromptAnalyzer()
    return _analyzer


async def close_prompt_analyzer() -> None:
    global _analyzer
    if _analyzer is not None:
        await _analyzer.close()
        _analyzer = None
