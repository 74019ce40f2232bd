"""
Gemini-backed prompt analysis used by the ``/api/analyze`` proxy.

One best-effort ``generate_content`` call per request, constrained to a JSON
object with the ``cn``, ``en`` and ``summary`` fields.
"""

import asyncio
import logging

from google import genai
from google.genai import types

from core.config import get_settings
from core.exceptions import AnalysisError, ExternalServiceError

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT_TEMPLATE = """Analyze this prompt for an AI image generator: "{text}".
      1. If the input is Chinese, translate it to English. If English, translate to Chinese.
      2. Provide a very concise, one-sentence summary (under 20 words) describing the visual subject,use Chinese.

      Return a JSON object."""

ANALYSIS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "cn": types.Schema(type=types.Type.STRING, description="The prompt in Chinese"),
        "en": types.Schema(type=types.Type.STRING, description="The prompt in English"),
        "summary": types.Schema(
            type=types.Type.STRING,
            description="A short one-sentence visual summary",
        ),
    },
    required=["cn", "en", "summary"],
)


class GeminiAnalysisService:
    """Thin wrapper around the Gemini SDK for prompt analysis."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        settings = get_settings()
        self._api_key = api_key or settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._client: genai.Client | None = None

        if self._api_key:
            self._client = genai.Client(api_key=self._api_key)

    @property
    def is_available(self) -> bool:
        return self._client is not None

    def build_prompt(self, text: str) -> str:
        return ANALYSIS_PROMPT_TEMPLATE.format(text=text)

    async def analyze(self, text: str) -> str:
        """
        Run the analysis and return the model's JSON text unchanged.

        Raises:
            ExternalServiceError: If no API key is configured
            AnalysisError: If the call fails or returns no text
        """
        if not self.is_available:
            raise ExternalServiceError(message="Server Configuration Error: Missing API Key")

        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=ANALYSIS_RESPONSE_SCHEMA,
        )

        def api_call():
            return self._client.models.generate_content(
                model=self._model,
                contents=self.build_prompt(text),
                config=config,
            )

        try:
            # Run sync SDK call in thread pool
            loop = asyncio.get_event_loop()
            response = await loop.run_in_executor(None, api_call)
        except Exception as e:
            logger.error(f"Gemini API Error: {e}")
            raise AnalysisError(details={"error": str(e)}) from e

        if not response.text:
            logger.error("Gemini API Error: empty response")
            raise AnalysisError(details={"error": "No response from Gemini"})

        return response.text


def get_analysis_service() -> GeminiAnalysisService:
    """
    Build an analysis service from current settings.

    Constructed per request so a key added to the environment is picked up
    after the settings cache is cleared.
    """
    return GeminiAnalysisService()
