"""
Health Check API endpoints.
"""

import logging
from datetime import datetime

from fastapi import APIRouter

from src.config import settings
from src.api.schemas import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the service components.",
)
async def health_check():
    """
    Health check of the in-process components.

    The service has no backing store or broker, so this only verifies that
    the logistics orchestrator can be built from the current settings.
    """
    from src.modules.logistics_matching import get_orchestrator

    services = {}

    try:
        get_orchestrator()
        services["logistics_matching"] = True
    except Exception as e:
        logger.error(f"Logistics module health check failed: {e}")
        services["logistics_matching"] = False

    overall_status = "healthy" if all(services.values()) else "degraded"

    return HealthResponse(
        status=overall_status,
        timestamp=datetime.utcnow(),
        services=services,
        version=settings.app_version,
    )


@router.get(
    "/live",
    summary="Liveness probe",
    description="Simple liveness check for Kubernetes.",
)
async def liveness():
    """Simple liveness probe - returns 200 if server is running."""
    return {"status": "alive"}
