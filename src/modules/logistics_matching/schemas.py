"""
Pydantic schemas for the Logistics Matching module
"""

from datetime import datetime, time
from typing import List, Optional, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    ServiceType,
    CompanyType,
    VehicleType,
    Specialization,
    Weekday,
    RejectionReason,
    ZONE_MIN_RADIUS_KM,
    ZONE_MAX_RADIUS_KM,
    DEFAULT_COVERAGE_RADIUS_KM,
    DEFAULT_WORKING_DAYS,
    DEFAULT_WORKING_START,
    DEFAULT_WORKING_END,
    MIN_REVIEW_RATING,
    MAX_REVIEW_RATING,
    MAX_AVERAGE_RATING,
)


class Coordinate(BaseModel):
    """Geographic point. Ranges are not checked here."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")


# ============================================================
# DELIVERY ZONES
# ============================================================

class DistanceTier(BaseModel):
    """Distance band with its surcharge."""
    min_km: float = Field(..., ge=0, description="Lower bound of the band (inclusive)")
    max_km: float = Field(..., ge=0, description="Upper bound of the band (inclusive)")
    additional_fee: float = Field(..., ge=0, description="Surcharge for this band")

    @model_validator(mode="after")
    def check_bounds(self):
        if self.max_km < self.min_km:
            raise ValueError("max_km must be greater than or equal to min_km")
        return self


class SpecialCondition(BaseModel):
    """Situational surcharge, keyed by its label on the zone."""
    additional_fee: float = Field(..., ge=0)
    description: Optional[str] = None


class OperatingHours(BaseModel):
    """Daily service window of a zone."""
    start_time: time = Field(..., description="Opening time (HH:MM)")
    end_time: time = Field(..., description="Closing time (HH:MM)")
    is_24_hours: bool = False


class ZoneStatistics(BaseModel):
    total_deliveries: int = Field(default=0, ge=0)
    average_delivery_time_minutes: float = Field(default=0.0, ge=0)
    customer_rating: float = Field(default=0.0, ge=0, le=MAX_AVERAGE_RATING)
    rated_deliveries: int = Field(default=0, ge=0, description="Deliveries that received a customer rating")


class DeliveryZone(BaseModel):
    """Circular delivery area with its pricing rules."""
    id: str = Field(..., description="Zone identifier")
    name: str = Field(..., description="Unique zone name")
    description: Optional[str] = None
    boundary_points: List[Coordinate] = Field(
        default_factory=list,
        description="Polygon vertices, only used in polygon membership mode"
    )
    center: Coordinate
    radius_km: float = Field(..., ge=ZONE_MIN_RADIUS_KM, le=ZONE_MAX_RADIUS_KM)
    base_fee: float = Field(..., ge=0)
    distance_tiers: List[DistanceTier] = Field(default_factory=list)
    special_conditions: Dict[str, SpecialCondition] = Field(default_factory=dict)
    active: bool = True
    operating_hours: Optional[OperatingHours] = None
    statistics: ZoneStatistics = Field(default_factory=ZoneStatistics)


# ============================================================
# DELIVERY PARTNERS
# ============================================================

class ServiceOffering(BaseModel):
    """One priced service a partner sells."""
    service_type: ServiceType
    description: Optional[str] = None
    base_price: float = Field(..., ge=0)
    per_km_price: float = Field(..., ge=0)
    max_weight: Optional[float] = Field(None, gt=0, description="Weight of one billing unit (kg)")
    max_distance: Optional[float] = Field(None, gt=0, description="Advertised maximum distance (km)")
    active: bool = True


class VehicleClass(BaseModel):
    type: VehicleType
    capacity_weight: Optional[float] = Field(None, ge=0)
    capacity_volume: Optional[float] = Field(None, ge=0)
    unit: str = "kg"
    count: int = Field(default=1, ge=0)
    is_refrigerated: bool = False


class Coverage(BaseModel):
    """Declared service area of a partner."""
    cities: List[str] = Field(default_factory=list)
    states: List[str] = Field(default_factory=list)
    radius_km: float = Field(default=DEFAULT_COVERAGE_RADIUS_KM, ge=0)


class WarehouseLink(BaseModel):
    warehouse_id: str
    distance_km: Optional[float] = Field(None, ge=0)
    eta_minutes: Optional[float] = Field(None, ge=0)
    active: bool = True


class Review(BaseModel):
    user_id: str
    rating: int = Field(..., ge=MIN_REVIEW_RATING, le=MAX_REVIEW_RATING)
    comment: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class PartnerRating(BaseModel):
    """Review-derived reputation of a partner."""
    average: float = Field(default=0.0, ge=0, le=MAX_AVERAGE_RATING)
    total_ratings: int = Field(default=0, ge=0)
    reviews: List[Review] = Field(default_factory=list)


class PerformanceStats(BaseModel):
    """Running delivery metrics of a partner."""
    total_deliveries: int = Field(default=0, ge=0)
    successful_deliveries: int = Field(default=0, ge=0)
    average_delivery_time_minutes: float = Field(default=0.0, ge=0)
    on_time_delivery_rate_percent: float = Field(default=0.0, ge=0, le=100)

    @model_validator(mode="after")
    def check_counts(self):
        if self.successful_deliveries > self.total_deliveries:
            raise ValueError(
                "successful_deliveries cannot exceed total_deliveries"
            )
        return self


class WorkingHours(BaseModel):
    start: time = Field(default=DEFAULT_WORKING_START)
    end: time = Field(default=DEFAULT_WORKING_END)
    days: List[Weekday] = Field(default_factory=lambda: list(DEFAULT_WORKING_DAYS))


class DeliveryPartner(BaseModel):
    """Delivery/logistics provider."""
    id: str = Field(..., description="Partner identifier")
    name: str = Field(..., min_length=1)
    company_type: CompanyType
    services: List[ServiceOffering] = Field(default_factory=list)
    coverage: Coverage = Field(default_factory=Coverage)
    vehicles: List[VehicleClass] = Field(default_factory=list)
    warehouse_links: List[WarehouseLink] = Field(default_factory=list)
    rating: PartnerRating = Field(default_factory=PartnerRating)
    performance: PerformanceStats = Field(default_factory=PerformanceStats)
    verified: bool = False
    active: bool = True
    working_hours: WorkingHours = Field(default_factory=WorkingHours)
    specializations: List[Specialization] = Field(default_factory=list)


class ShipmentSchema(BaseModel):
    """Physical characteristics of what has to be moved."""
    weight: Optional[float] = Field(None, ge=0, description="Weight in kg")
    volume: Optional[float] = Field(None, ge=0, description="Volume in cubic meters")
    requires_refrigeration: bool = False


# ============================================================
# QUOTING
# ============================================================

class ZoneFeeBreakdownSchema(BaseModel):
    """How a zone fee was assembled."""
    zone_id: str
    zone_name: str
    distance_km: float
    base_fee: float
    tier_fee: float = 0.0
    condition_fees: Dict[str, float] = Field(default_factory=dict)
    total: float


class QuoteRequestSchema(BaseModel):
    """Quote request for a single shipment."""
    request_id: str = Field(..., description="Request identifier")
    pickup: Coordinate
    dropoff: Coordinate
    city: str
    state: str
    service_type: ServiceType
    shipment: ShipmentSchema = Field(default_factory=ShipmentSchema)
    active_conditions: List[str] = Field(default_factory=list)
    requested_at: Optional[datetime] = Field(
        None,
        description="When the pickup is wanted; enables opening-hours checks"
    )
    zones: List[DeliveryZone] = Field(default_factory=list)
    partners: List[DeliveryPartner] = Field(default_factory=list)


class PartnerQuoteSchema(BaseModel):
    partner_id: str
    name: str
    service_type: ServiceType
    cost: float = Field(..., ge=0)
    distance_km: float
    eligible_vehicles: List[VehicleType]
    rating_average: float
    on_time_delivery_rate_percent: float


class RejectedPartnerSchema(BaseModel):
    partner_id: str
    name: str
    reason: RejectionReason


class FilteringStatsSchema(BaseModel):
    """Statistics of the candidate filtering."""
    total_partners: int
    eligible_partners: int
    rejected_partners: int


class QuoteResponseSchema(BaseModel):
    """Result of a shipment quote."""
    status: str = Field(default="success")
    request_id: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    distance_km: float = Field(..., description="Pickup to drop-off distance")
    zone_quote: Optional[ZoneFeeBreakdownSchema] = None
    partner_quotes: List[PartnerQuoteSchema] = Field(default_factory=list)
    rejected_partners: List[RejectedPartnerSchema] = Field(default_factory=list)
    statistics: FilteringStatsSchema
    processing_time_ms: float
    warnings: Optional[List[str]] = None
