"""
Partner Pricing

Quotes a partner's delivery cost from its service catalog.
"""

import logging
import math
from typing import Optional

from .schemas import DeliveryPartner
from .partner_catalog import PartnerCatalog
from .exceptions import ServiceUnavailable
from .constants import ServiceType

logger = logging.getLogger(__name__)


class PartnerPricing:
    """
    Cost calculator for partner offerings.

    cost = base_price + distance × per_km_price

    When the shipment has a weight and the offering a max_weight, the cost is
    multiplied by the number of max_weight units needed:
        cost × ceil(weight / max_weight)
    """

    def __init__(self, catalog: Optional[PartnerCatalog] = None):
        self.catalog = catalog or PartnerCatalog()

    def quote_cost(
        self,
        partner: DeliveryPartner,
        service_type: ServiceType,
        distance_km: float,
        weight: float = 0
    ) -> float:
        """
        Quote the cost of a delivery.

        Args:
            partner: Delivery partner
            service_type: Requested service
            distance_km: Delivery distance in km
            weight: Shipment weight (0 = ignore weight)

        Returns:
            Cost of the delivery

        Raises:
            ServiceUnavailable: No active offering of this type
        """
        service_type = ServiceType(service_type)
        offering = self.catalog.active_offering(partner, service_type)
        if offering is None:
            logger.info(f"Partner {partner.id} has no active {service_type.value} offering")
            raise ServiceUnavailable(service_type, partner_id=partner.id)

        cost = offering.base_price + distance_km * offering.per_km_price

        if weight > 0 and offering.max_weight:
            weight_factor = math.ceil(weight / offering.max_weight)
            cost *= weight_factor
            logger.debug(
                f"Partner {partner.id}: {weight} kg = {weight_factor} unit(s) "
                f"of {offering.max_weight} kg"
            )

        logger.debug(
            f"Partner {partner.id} {service_type.value} quote: "
            f"{distance_km:.2f} km, {weight} kg -> {cost:.2f}"
        )

        return cost
