"""
Zone Pricing

Computes the delivery fee charged by a zone for a drop-off point:
base fee + distance tier surcharge + special condition surcharges.
"""

import logging
from typing import Iterable, Optional

from .schemas import (
    Coordinate,
    DeliveryZone,
    DistanceTier,
    ZoneFeeBreakdownSchema,
)
from .utils import distance_km
from .constants import EARTH_RADIUS_KM

logger = logging.getLogger(__name__)


class ZonePricing:
    """
    Delivery fee calculator for a zone.

    fee = base_fee
        + additional_fee of the first tier with min_km ≤ d ≤ max_km
        + Σ additional_fee of every active special condition the zone defines

    where d is the distance between the zone center and the point.
    Tiers are scanned in stored order and are not checked for overlaps.
    """

    def __init__(self, earth_radius_km: float = EARTH_RADIUS_KM):
        self.earth_radius = earth_radius_km

    @staticmethod
    def select_tier(zone: DeliveryZone, distance: float) -> Optional[DistanceTier]:
        """Return the first tier whose band contains the distance, if any."""
        for tier in zone.distance_tiers:
            if tier.min_km <= distance <= tier.max_km:
                return tier
        return None

    def quote_fee_breakdown(
        self,
        zone: DeliveryZone,
        point: Coordinate,
        active_conditions: Iterable[str] = ()
    ) -> ZoneFeeBreakdownSchema:
        """
        Compute the zone fee with its components.

        Args:
            zone: Zone doing the delivery
            point: Drop-off point
            active_conditions: Condition labels currently in effect
                (e.g. "peak_hours", "rainy_day"); unknown labels are ignored

        Returns:
            ZoneFeeBreakdownSchema whose total is the fee
        """
        distance = distance_km(zone.center, point, radius=self.earth_radius)

        tier = self.select_tier(zone, distance)
        tier_fee = tier.additional_fee if tier else 0.0

        condition_fees = {}
        for label in active_conditions:
            if label in condition_fees:
                continue
            condition = zone.special_conditions.get(label)
            if condition is not None:
                condition_fees[label] = condition.additional_fee

        total = zone.base_fee + tier_fee + sum(condition_fees.values())

        logger.debug(
            f"Zone {zone.id} fee: base={zone.base_fee}, d={distance:.2f} km, "
            f"tier={tier_fee}, conditions={condition_fees}, total={total}"
        )

        return ZoneFeeBreakdownSchema(
            zone_id=zone.id,
            zone_name=zone.name,
            distance_km=distance,
            base_fee=zone.base_fee,
            tier_fee=tier_fee,
            condition_fees=condition_fees,
            total=total,
        )

    def quote_fee(
        self,
        zone: DeliveryZone,
        point: Coordinate,
        active_conditions: Iterable[str] = ()
    ) -> float:
        """Delivery fee charged by the zone for a point."""
        return self.quote_fee_breakdown(zone, point, active_conditions).total
