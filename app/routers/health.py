"""
Health check endpoint.
"""
import logging
from datetime import datetime

from fastapi import APIRouter

from app.config import settings
from app.models.schemas import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HealthCheckResponse)
async def health_check():
    """
    Report whether the service is configured to reach its completion endpoint.

    Does not call the endpoint itself; run ``verify_setup.py`` for that.
    """
    llm_configured = bool(settings.LLM_API_KEY and settings.LLM_BASE_URL)
    if not llm_configured:
        logger.warning("Health check: LLM_API_KEY is not set")

    return HealthCheckResponse(
        status="healthy" if llm_configured else "degraded",
        llm_configured=llm_configured,
        model=settings.LLM_MODEL,
        timestamp=datetime.utcnow(),
    )
