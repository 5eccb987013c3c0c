"""
Orchestrator - Main coordinator for the Logistics Matching module

Coordinates the quoting of one shipment:
1. Phase 1: Zone lookup and zone fee
2. Phase 2: Partner candidate search
3. Phase 3: Vehicle eligibility and partner cost
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .schemas import (
    QuoteRequestSchema,
    QuoteResponseSchema,
    ZoneFeeBreakdownSchema,
    PartnerQuoteSchema,
    RejectedPartnerSchema,
    FilteringStatsSchema,
)
from .zone_membership import ZoneMembership
from .zone_pricing import ZonePricing
from .partner_catalog import PartnerCatalog
from .partner_pricing import PartnerPricing
from .partner_search import PartnerSearch
from .utils import distance_km
from .constants import (
    EARTH_RADIUS_KM,
    RejectionReason,
    ZoneMembershipMode,
)

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Orchestrates the complete shipment quoting workflow.

    Workflow:
    1. Measure pickup to drop-off distance
    2. Find the zone serving the drop-off point and quote its fee
    3. Search partner candidates (active, verified, covering, offering)
    4. Keep candidates working at the requested time with a suitable vehicle
    5. Quote each remaining candidate, in input order
    """

    def __init__(
        self,
        membership_mode: ZoneMembershipMode = ZoneMembershipMode.RADIUS,
        earth_radius_km: float = EARTH_RADIUS_KM
    ):
        """Initialize orchestrator with all required components."""
        self.earth_radius = earth_radius_km
        self.zone_membership = ZoneMembership(membership_mode, earth_radius_km)
        self.zone_pricing = ZonePricing(earth_radius_km)
        self.catalog = PartnerCatalog()
        self.partner_search = PartnerSearch(self.catalog)
        self.partner_pricing = PartnerPricing(self.catalog)

    def quote_shipment(self, request: QuoteRequestSchema) -> QuoteResponseSchema:
        """
        Complete quoting workflow.

        Args:
            request: Shipment, locations and the zone/partner snapshot

        Returns:
            QuoteResponseSchema with the zone fee and per-partner costs
        """
        start_time = datetime.now()
        warnings: List[str] = []

        logger.info(
            f"Starting quote {request.request_id} with {len(request.zones)} zones "
            f"and {len(request.partners)} partners"
        )

        distance = distance_km(request.pickup, request.dropoff, radius=self.earth_radius)

        # ============================================================
        # PHASE 1: ZONE FEE
        # ============================================================
        logger.info("Phase 1: Zone lookup")

        zone_quote = self._quote_zone(request, warnings)

        # ============================================================
        # PHASE 2: PARTNER SEARCH
        # ============================================================
        logger.info("Phase 2: Partner search")

        candidates, rejected = self.partner_search.filter_candidates(
            partners=request.partners,
            city=request.city,
            state=request.state,
            service_type=request.service_type
        )

        # ============================================================
        # PHASE 3: PARTNER QUOTES
        # ============================================================
        logger.info(f"Phase 3: Quoting {len(candidates)} candidates")

        partner_quotes, late_rejections = self._quote_partners(request, candidates, distance)
        rejected.extend(late_rejections)

        if not partner_quotes:
            logger.warning(f"No partner can quote request {request.request_id}")
            warnings.append("No delivery partner available for this shipment")

        end_time = datetime.now()
        processing_time_ms = (end_time - start_time).total_seconds() * 1000

        response = QuoteResponseSchema(
            status="success",
            request_id=request.request_id,
            timestamp=end_time,
            distance_km=distance,
            zone_quote=zone_quote,
            partner_quotes=partner_quotes,
            rejected_partners=[RejectedPartnerSchema(**r) for r in rejected],
            statistics=FilteringStatsSchema(
                total_partners=len(request.partners),
                eligible_partners=len(partner_quotes),
                rejected_partners=len(rejected),
            ),
            processing_time_ms=processing_time_ms,
            warnings=warnings or None,
        )

        logger.info(
            f"Quote complete for {request.request_id}: "
            f"{len(partner_quotes)} partner quotes in {processing_time_ms:.0f}ms"
        )

        return response

    def _quote_zone(
        self,
        request: QuoteRequestSchema,
        warnings: List[str]
    ) -> Optional[ZoneFeeBreakdownSchema]:
        """Locate the drop-off zone and quote its fee."""
        zone = self.zone_membership.locate_zone(request.zones, request.dropoff)

        if zone is None:
            logger.warning(f"Drop-off of {request.request_id} is outside every active zone")
            warnings.append("Drop-off point is outside every active delivery zone")
            return None

        if request.requested_at is not None and not self.zone_membership.is_operating_at(
            zone, request.requested_at.time()
        ):
            warnings.append(f"Zone '{zone.name}' is closed at the requested time")

        return self.zone_pricing.quote_fee_breakdown(
            zone, request.dropoff, request.active_conditions
        )

    def _quote_partners(
        self,
        request: QuoteRequestSchema,
        candidates: list,
        distance: float
    ) -> Tuple[List[PartnerQuoteSchema], List[Dict[str, Any]]]:
        """
        Check working hours and vehicles, then price each candidate.

        Returns:
            Tuple of (partner quotes, partners rejected at this stage)
        """
        shipment = request.shipment
        quotes = []
        rejected = []

        for partner in candidates:
            if request.requested_at is not None and not self.catalog.is_working_at(
                partner, request.requested_at
            ):
                rejected.append(self._rejection(partner, RejectionReason.OUTSIDE_WORKING_HOURS))
                continue

            vehicles = self.catalog.eligible_vehicles(
                partner,
                weight=shipment.weight,
                volume=shipment.volume,
                requires_refrigeration=shipment.requires_refrigeration
            )
            if not vehicles:
                rejected.append(self._rejection(partner, RejectionReason.NO_SUITABLE_VEHICLE))
                continue

            cost = self.partner_pricing.quote_cost(
                partner,
                request.service_type,
                distance,
                weight=shipment.weight or 0
            )

            quotes.append(PartnerQuoteSchema(
                partner_id=partner.id,
                name=partner.name,
                service_type=request.service_type,
                cost=cost,
                distance_km=distance,
                eligible_vehicles=[vehicle.type for vehicle in vehicles],
                rating_average=partner.rating.average,
                on_time_delivery_rate_percent=partner.performance.on_time_delivery_rate_percent,
            ))

        return quotes, rejected

    @staticmethod
    def _rejection(partner, reason: RejectionReason) -> Dict[str, Any]:
        logger.debug(f"Partner {partner.id} REJECTED: {reason.value}")
        return {"partner_id": partner.id, "name": partner.name, "reason": reason}


# ============================================================
# DEPENDENCY INJECTION / FACTORY
# ============================================================

_orchestrator_instance: Optional[Orchestrator] = None


def get_orchestrator() -> Orchestrator:
    """
    Get singleton instance of Orchestrator.

    Used for dependency injection in FastAPI routes. Membership mode and
    Earth radius come from the application settings.

    Returns:
        Orchestrator instance
    """
    global _orchestrator_instance

    if _orchestrator_instance is None:
        from src.config import settings

        _orchestrator_instance = Orchestrator(
            membership_mode=settings.zone_membership_mode,
            earth_radius_km=settings.earth_radius_km,
        )
        logger.info(
            f"Orchestrator instance created (zone membership: "
            f"{_orchestrator_instance.zone_membership.mode.value})"
        )

    return _orchestrator_instance
