"""
Constants for the Logistics Matching module
"""

from datetime import time
from enum import Enum
from typing import List

# Earth radius in kilometers (for Haversine calculations)
EARTH_RADIUS_KM = 6371.0

# Zone radius bounds (km), enforced when a zone is built
ZONE_MIN_RADIUS_KM = 1.0
ZONE_MAX_RADIUS_KM = 50.0

# Default partner coverage radius (km)
DEFAULT_COVERAGE_RADIUS_KM = 100.0

# Review rating bounds
MIN_REVIEW_RATING = 1
MAX_REVIEW_RATING = 5
MAX_AVERAGE_RATING = 5.0

# Minimum number of boundary points forming a usable polygon
MIN_POLYGON_POINTS = 3


class ServiceType(str, Enum):
    """Delivery services a partner can sell."""
    SAME_DAY = "same_day"
    NEXT_DAY = "next_day"
    EXPRESS = "express"
    STANDARD = "standard"
    BULK = "bulk"


class CompanyType(str, Enum):
    """Kinds of delivery partner companies."""
    LOGISTICS = "logistics"
    COURIER = "courier"
    TRANSPORT = "transport"
    WAREHOUSE_DELIVERY = "warehouse_delivery"


class VehicleType(str, Enum):
    """Vehicle classes in a partner fleet."""
    BIKE = "bike"
    CAR = "car"
    VAN = "van"
    TRUCK = "truck"
    REFRIGERATED_TRUCK = "refrigerated_truck"


class Specialization(str, Enum):
    """Produce categories a partner is equipped for."""
    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    DAIRY = "dairy"
    MEAT = "meat"
    FROZEN = "frozen"
    ORGANIC = "organic"
    BULK = "bulk"


class Weekday(str, Enum):
    """Working days, ordered like datetime.weekday()."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


WEEKDAYS_IN_ORDER: List[Weekday] = list(Weekday)

DEFAULT_WORKING_DAYS: List[Weekday] = WEEKDAYS_IN_ORDER[:5]
DEFAULT_WORKING_START = time(9, 0)
DEFAULT_WORKING_END = time(18, 0)


class ZoneMembershipMode(str, Enum):
    """How a point is tested against a delivery zone."""
    RADIUS = "radius"      # center + radius circle
    POLYGON = "polygon"    # containment in the boundary polygon


class RejectionReason(str, Enum):
    """Why a partner was dropped from a candidate list."""
    INACTIVE = "inactive"
    UNVERIFIED = "unverified"
    OUTSIDE_COVERAGE = "outside_coverage"
    SERVICE_UNAVAILABLE = "service_unavailable"
    OUTSIDE_WORKING_HOURS = "outside_working_hours"
    NO_SUITABLE_VEHICLE = "no_suitable_vehicle"
