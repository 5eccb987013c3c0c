"""
Logistics Matching

Delivery zone and delivery partner matching and pricing for marketplace
orders.

This module provides:
- Great-circle distances (Haversine) and zone membership
- Zone fees with distance tiers and special conditions
- Partner coverage, vehicle eligibility and cost quotes
- Running partner performance and rating statistics
- Partner candidate search
"""

from .orchestrator import Orchestrator, get_orchestrator
from .exceptions import LogisticsError, ServiceUnavailable
from .constants import (
    ServiceType,
    CompanyType,
    VehicleType,
    Specialization,
    ZoneMembershipMode,
    RejectionReason,
)
from .schemas import (
    Coordinate,
    DeliveryZone,
    DeliveryPartner,
    PerformanceStats,
    PartnerRating,
    ShipmentSchema,
    QuoteRequestSchema,
    QuoteResponseSchema,
)
from .utils import distance_km
from .zone_membership import ZoneMembership
from .zone_pricing import ZonePricing
from .partner_catalog import PartnerCatalog
from .partner_pricing import PartnerPricing
from .partner_search import PartnerSearch
from .partner_stats import (
    record_delivery,
    record_review,
    record_zone_delivery,
    on_time_delivery_rate,
)

__all__ = [
    "Orchestrator",
    "get_orchestrator",
    "LogisticsError",
    "ServiceUnavailable",
    "ServiceType",
    "CompanyType",
    "VehicleType",
    "Specialization",
    "ZoneMembershipMode",
    "RejectionReason",
    "Coordinate",
    "DeliveryZone",
    "DeliveryPartner",
    "PerformanceStats",
    "PartnerRating",
    "ShipmentSchema",
    "QuoteRequestSchema",
    "QuoteResponseSchema",
    "distance_km",
    "ZoneMembership",
    "ZonePricing",
    "PartnerCatalog",
    "PartnerPricing",
    "PartnerSearch",
    "record_delivery",
    "record_review",
    "record_zone_delivery",
    "on_time_delivery_rate",
]
