"""
Zone Membership

Decides whether a coordinate falls inside a delivery zone and which zone
serves a given drop-off point.
"""

import logging
from datetime import time
from typing import Iterable, Optional, Union

from .schemas import Coordinate, DeliveryZone
from .utils import distance_km, point_in_polygon
from .constants import (
    EARTH_RADIUS_KM,
    MIN_POLYGON_POINTS,
    ZoneMembershipMode,
)

logger = logging.getLogger(__name__)


class ZoneMembership:
    """
    Point-in-zone tests for delivery zones.

    In RADIUS mode (default) a point P belongs to zone Z if:
        d(Z.center, P) ≤ Z.radius_km

    In POLYGON mode, zones with at least three boundary points are tested
    by polygon containment over those points; other zones keep the circle test.
    """

    def __init__(
        self,
        mode: Union[ZoneMembershipMode, str] = ZoneMembershipMode.RADIUS,
        earth_radius_km: float = EARTH_RADIUS_KM
    ):
        """
        Initialize zone membership.

        Args:
            mode: Membership rule (radius or polygon)
            earth_radius_km: Earth radius in kilometers (default: 6371.0)
        """
        self.mode = ZoneMembershipMode(mode)
        self.earth_radius = earth_radius_km

    def distance_from_center(self, zone: DeliveryZone, point: Coordinate) -> float:
        """Distance in km between the zone center and a point."""
        return distance_km(zone.center, point, radius=self.earth_radius)

    def is_in_zone(self, zone: DeliveryZone, point: Coordinate) -> bool:
        """
        Check whether a point is served by a zone.

        Coordinates are not range-checked; the zone's active flag is not
        considered here (see locate_zone).
        """
        if (
            self.mode == ZoneMembershipMode.POLYGON
            and len(zone.boundary_points) >= MIN_POLYGON_POINTS
        ):
            return point_in_polygon(point, zone.boundary_points)

        return self.distance_from_center(zone, point) <= zone.radius_km

    def locate_zone(
        self,
        zones: Iterable[DeliveryZone],
        point: Coordinate
    ) -> Optional[DeliveryZone]:
        """
        Find the zone serving a point.

        Args:
            zones: Candidate zones, in stored order
            point: Drop-off point

        Returns:
            First active zone containing the point, or None
        """
        for zone in zones:
            if not zone.active:
                logger.debug(f"Zone {zone.id} skipped: inactive")
                continue
            if self.is_in_zone(zone, point):
                logger.debug(f"Point ({point.latitude}, {point.longitude}) in zone {zone.id}")
                return zone

        logger.debug(f"No active zone for point ({point.latitude}, {point.longitude})")
        return None

    @staticmethod
    def is_operating_at(zone: DeliveryZone, at: time) -> bool:
        """
        Check the zone's daily service window.

        Zones without declared hours, or flagged 24 hours, are always open.
        A window whose start is after its end runs across midnight.
        """
        hours = zone.operating_hours
        if hours is None or hours.is_24_hours:
            return True

        start, end = hours.start_time, hours.end_time
        if start == end:
            return True
        if start < end:
            return start <= at < end
        return at >= start or at < end
