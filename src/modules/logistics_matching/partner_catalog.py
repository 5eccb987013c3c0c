"""
Partner Catalog

Eligibility queries over a partner's declared offerings, coverage area,
vehicle fleet and working hours.
"""

import logging
from datetime import datetime
from typing import List, Optional

from .schemas import DeliveryPartner, ServiceOffering, VehicleClass
from .constants import ServiceType, Specialization, WEEKDAYS_IN_ORDER

logger = logging.getLogger(__name__)


class PartnerCatalog:
    """Stateless queries about what a partner can do."""

    @staticmethod
    def covers_location(partner: DeliveryPartner, city: str, state: str) -> bool:
        """Strict coverage: the city or the state is declared."""
        return city in partner.coverage.cities or state in partner.coverage.states

    @staticmethod
    def is_active_regardless_of_coverage(partner: DeliveryPartner) -> bool:
        """
        Permissive serviceability clause.

        Any active partner passes, whatever its declared coverage.
        """
        return partner.active

    def can_serve(self, partner: DeliveryPartner, city: str, state: str) -> bool:
        """
        Historic serviceability check.

        True if the city or state is covered OR the partner is active, which
        makes declared coverage irrelevant for active partners. PartnerSearch
        uses the strict covers_location instead.
        """
        return (
            self.covers_location(partner, city, state)
            or self.is_active_regardless_of_coverage(partner)
        )

    @staticmethod
    def active_offering(
        partner: DeliveryPartner,
        service_type: ServiceType
    ) -> Optional[ServiceOffering]:
        """First active offering of the given type, in catalog order."""
        for offering in partner.services:
            if offering.service_type == service_type and offering.active:
                return offering
        return None

    def offers_service(self, partner: DeliveryPartner, service_type: ServiceType) -> bool:
        return self.active_offering(partner, service_type) is not None

    @staticmethod
    def eligible_vehicles(
        partner: DeliveryPartner,
        weight: Optional[float] = None,
        volume: Optional[float] = None,
        requires_refrigeration: bool = False
    ) -> List[VehicleClass]:
        """
        Vehicles of the fleet able to carry a shipment.

        A missing (or zero) weight/volume, or a vehicle without the matching
        capacity, does not restrict the choice.

        Args:
            partner: Delivery partner
            weight: Shipment weight
            volume: Shipment volume
            requires_refrigeration: Cold chain needed

        Returns:
            Matching vehicles in fleet order (possibly empty)
        """
        vehicles = []

        for vehicle in partner.vehicles:
            if requires_refrigeration and not vehicle.is_refrigerated:
                continue
            if weight and vehicle.capacity_weight and weight > vehicle.capacity_weight:
                continue
            if volume and vehicle.capacity_volume and volume > vehicle.capacity_volume:
                continue
            vehicles.append(vehicle)

        logger.debug(
            f"Partner {partner.id}: {len(vehicles)}/{len(partner.vehicles)} vehicles "
            f"eligible (weight={weight}, volume={volume}, "
            f"refrigeration={requires_refrigeration})"
        )

        return vehicles

    @staticmethod
    def is_working_at(partner: DeliveryPartner, at: datetime) -> bool:
        """True if `at` falls on a working day within working hours."""
        hours = partner.working_hours
        weekday = WEEKDAYS_IN_ORDER[at.weekday()]

        if weekday not in hours.days:
            return False

        return hours.start <= at.time() < hours.end

    @staticmethod
    def handles(partner: DeliveryPartner, specialization: Specialization) -> bool:
        return specialization in partner.specializations
