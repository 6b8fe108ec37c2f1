# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-01-28
# Description: health.py
# -----------------------------------------------------------------------------
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_health_service
from services.RAGHealthService import RAGHealthService
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat())


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: RAGHealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called")
    result = svc.deep_health()
    logger.info("GET /health/deep completed (status=%s)", result.status)
    return result
