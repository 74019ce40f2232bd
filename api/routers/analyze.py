"""
Analysis proxy router.

Endpoints:
- POST /api/analyze - Translate and summarize a prompt with Gemini

Responses use a bare ``{"error": ...}`` body rather than the structured API
error format, because the analyzer client relays them as-is.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_gemini_service
from api.schemas.prompts import AnalyzeRequest
from core.exceptions import AnalysisError, ExternalServiceError
from services.gemini_analysis import GeminiAnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

MISSING_KEY_ERROR = "Server Configuration Error: Missing API Key"


@router.post("/analyze")
async def analyze_prompt(
    request: AnalyzeRequest,
    service: GeminiAnalysisService = Depends(get_gemini_service),
):
    """
    Translate a prompt between Chinese and English and summarize it.

    On success the model's JSON object (``cn``, ``en``, ``summary``) is
    returned exactly as produced.
    """
    if not service.is_available:
        logger.error("GEMINI_API_KEY is not set")
        return JSONResponse(status_code=500, content={"error": MISSING_KEY_ERROR})

    try:
        result = await service.analyze(request.text)
    except ExternalServiceError as e:
        logger.error(f"Analysis service unavailable: {e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
    except AnalysisError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Analysis Failed", "details": e.details.get("error", e.message)},
        )

    return Response(content=result, media_type="application/json")


@router.api_route(
    "/analyze",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def analyze_method_not_allowed():
    return JSONResponse(status_code=405, content={"error": "Method Not Allowed"})
