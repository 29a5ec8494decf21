"""WOD generator endpoint (Gemini)."""

import logging

from fastapi import APIRouter, HTTPException

from app.config import settings
from app.schemas.wod import WodRequest, WodResponse
from app.services.wod_generator import generate_wod

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/wod", tags=["wod"])


@router.post(
    "/generate",
    response_model=WodResponse,
    summary="Generate a WOD",
    responses={
        502: {"description": "AI generation failed"},
        503: {"description": "WOD generator not configured"},
    },
)
async def generate(body: WodRequest) -> WodResponse:
    if not settings.google_gemini_api_key:
        raise HTTPException(status_code=503, detail="WOD generator is not configured.")
    try:
        return await generate_wod(body)
    except Exception as e:
        logger.exception("WOD generation failed")
        detail = "Could not generate the WOD. Please try again."
        if settings.debug:
            detail += f" ({type(e).__name__}: {e})"
        raise HTTPException(status_code=502, detail=detail) from e
