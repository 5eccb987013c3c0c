from fastapi import APIRouter

from .logistics import router as logistics_router
from .health import router as health_router

api_router = APIRouter()

api_router.include_router(
    logistics_router,
    prefix="/logistics",
    tags=["Logistics Matching"],
)

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["Health"],
)
