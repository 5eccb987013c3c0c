"""
API schemas for request/response validation.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.modules.logistics_matching.constants import (
    ServiceType,
    MIN_REVIEW_RATING,
    MAX_REVIEW_RATING,
)
from src.modules.logistics_matching.schemas import (
    Coordinate,
    DeliveryZone,
    DeliveryPartner,
    PerformanceStats,
    PartnerRating,
    RejectedPartnerSchema,
    ZoneFeeBreakdownSchema,
)


# Request schemas
class ZoneFeeRequest(BaseModel):
    """Schema for a zone fee quote."""

    zone: DeliveryZone
    point: Coordinate
    active_conditions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "zone": {
                "id": "zone-trichy-central",
                "name": "Trichy Central",
                "center": {"latitude": 10.7905, "longitude": 78.7047},
                "radius_km": 15,
                "base_fee": 50,
                "distance_tiers": [{"min_km": 0, "max_km": 5, "additional_fee": 10}],
                "special_conditions": {"rainy_day": {"additional_fee": 20}},
            },
            "point": {"latitude": 10.8050, "longitude": 78.6856},
            "active_conditions": ["rainy_day"],
        }
    })


class PartnerCostRequest(BaseModel):
    """Schema for a partner cost quote."""

    partner: DeliveryPartner
    service_type: ServiceType
    distance_km: float = Field(..., ge=0, description="Delivery distance in km")
    weight: float = Field(default=0, ge=0, description="Shipment weight in kg")


class PartnerSearchRequest(BaseModel):
    """Schema for partner candidate search."""

    partners: List[DeliveryPartner]
    city: str
    state: str
    service_type: ServiceType


class DeliveryRecordRequest(BaseModel):
    """Schema for recording a completed delivery."""

    performance: PerformanceStats = Field(default_factory=PerformanceStats)
    delivery_time_minutes: float = Field(..., ge=0)
    was_successful: bool


class ReviewRecordRequest(BaseModel):
    """Schema for recording a partner review."""

    rating: PartnerRating = Field(default_factory=PartnerRating)
    user_id: str
    rating_value: int = Field(..., ge=MIN_REVIEW_RATING, le=MAX_REVIEW_RATING)
    comment: Optional[str] = None


# Response schemas
class ZoneFeeResponse(BaseModel):
    """Response for a zone fee quote."""

    in_zone: bool
    fee: ZoneFeeBreakdownSchema


class PartnerCostResponse(BaseModel):
    """Response for a partner cost quote."""

    partner_id: str
    service_type: ServiceType
    distance_km: float
    weight: float
    cost: float


class PartnerSearchResponse(BaseModel):
    """Response for partner candidate search."""

    candidates: List[DeliveryPartner]
    rejected: List[RejectedPartnerSchema]
    total_results: int


class HealthResponse(BaseModel):
    """Response for health check."""

    status: str
    timestamp: datetime
    services: Dict[str, bool]
    version: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    detail: Optional[Any] = None
    status_code: int
