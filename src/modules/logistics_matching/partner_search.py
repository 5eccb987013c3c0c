"""
Partner Search

Narrows a partner population to the active, verified partners covering a
location and selling the requested service.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .schemas import DeliveryPartner
from .partner_catalog import PartnerCatalog
from .constants import ServiceType, RejectionReason

logger = logging.getLogger(__name__)


class PartnerSearch:
    """
    Filters delivery partners for a delivery request.

    A partner P is a candidate if:
        P.active AND P.verified
        AND (city ∈ P.coverage.cities OR state ∈ P.coverage.states)
        AND P has an active offering of the requested service type

    Unlike PartnerCatalog.can_serve, being active does not stand in for
    coverage here. Results keep the order of the input population.
    """

    def __init__(self, catalog: Optional[PartnerCatalog] = None):
        self.catalog = catalog or PartnerCatalog()

    def rejection_reason(
        self,
        partner: DeliveryPartner,
        city: str,
        state: str,
        service_type: ServiceType
    ) -> Optional[RejectionReason]:
        """First failed criterion for a partner, or None if it qualifies."""
        if not partner.active:
            return RejectionReason.INACTIVE
        if not partner.verified:
            return RejectionReason.UNVERIFIED
        if not self.catalog.covers_location(partner, city, state):
            return RejectionReason.OUTSIDE_COVERAGE
        if not self.catalog.offers_service(partner, service_type):
            return RejectionReason.SERVICE_UNAVAILABLE
        return None

    def filter_candidates(
        self,
        partners: Iterable[DeliveryPartner],
        city: str,
        state: str,
        service_type: ServiceType
    ) -> Tuple[List[DeliveryPartner], List[Dict[str, Any]]]:
        """
        Split partners into candidates and rejected partners.

        Args:
            partners: Partner population
            city: Delivery city
            state: Delivery state
            service_type: Requested service

        Returns:
            Tuple of:
            - List of candidate partners
            - List of rejected partners with reasons
        """
        eligible = []
        rejected = []

        for partner in partners:
            reason = self.rejection_reason(partner, city, state, service_type)
            if reason is None:
                eligible.append(partner)
                logger.debug(f"Partner {partner.id} ELIGIBLE")
            else:
                rejected.append({
                    "partner_id": partner.id,
                    "name": partner.name,
                    "reason": reason,
                })
                logger.debug(f"Partner {partner.id} REJECTED: {reason.value}")

        logger.info(
            f"Partner search in {city}/{state} for {ServiceType(service_type).value}: "
            f"{len(eligible)} eligible, {len(rejected)} rejected"
        )

        return eligible, rejected

    def find_candidates(
        self,
        partners: Iterable[DeliveryPartner],
        city: str,
        state: str,
        service_type: ServiceType,
        weight: float = 0
    ) -> List[DeliveryPartner]:
        """
        Candidate partners for a delivery, in input order.

        `weight` is accepted for call compatibility but does not filter;
        vehicle capacity is checked with PartnerCatalog.eligible_vehicles.
        """
        eligible, _ = self.filter_candidates(partners, city, state, service_type)
        return eligible
