"""
Logistics Matching API endpoints.

Stateless quoting and statistics service: every zone and partner snapshot
travels in the request body, and updated statistics are returned for the
caller to persist.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from src.modules.logistics_matching import (
    Orchestrator,
    QuoteRequestSchema,
    QuoteResponseSchema,
    PerformanceStats,
    PartnerRating,
    ServiceUnavailable,
    record_delivery,
    record_review,
)
from src.modules.logistics_matching.schemas import RejectedPartnerSchema
from src.api.dependencies import get_orchestrator_dep
from src.api.schemas import (
    ErrorResponse,
    ZoneFeeRequest,
    ZoneFeeResponse,
    PartnerCostRequest,
    PartnerCostResponse,
    PartnerSearchRequest,
    PartnerSearchResponse,
    DeliveryRecordRequest,
    ReviewRecordRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/quote",
    response_model=QuoteResponseSchema,
    responses={
        200: {"description": "Successful quote"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    summary="Quote a shipment",
    description="""
    Quotes a shipment against a snapshot of delivery zones and partners.

    **Process:**
    1. **Zone fee**: first active zone containing the drop-off point,
       base fee + distance tier + special conditions
    2. **Partner search**: active, verified partners covering the city or
       state and selling the requested service
    3. **Partner quotes**: working hours (if `requested_at` is set), vehicle
       eligibility for the shipment, then base + per-km cost with weight units

    Partner quotes keep the order of the submitted partners.
    """,
)
async def quote_shipment(
    request: QuoteRequestSchema,
    orchestrator: Orchestrator = Depends(get_orchestrator_dep),
) -> QuoteResponseSchema:
    logger.info(
        f"Quote request {request.request_id} for {request.service_type.value} "
        f"with {len(request.partners)} partners"
    )

    try:
        return orchestrator.quote_shipment(request)

    except ValueError as e:
        logger.error(f"Validation error in quote: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Quote error: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


@router.post(
    "/zones/fee",
    response_model=ZoneFeeResponse,
    summary="Zone delivery fee",
    description="Membership test and fee breakdown of one point for one zone.",
)
async def zone_fee(
    request: ZoneFeeRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator_dep),
) -> ZoneFeeResponse:
    breakdown = orchestrator.zone_pricing.quote_fee_breakdown(
        request.zone, request.point, request.active_conditions
    )
    return ZoneFeeResponse(
        in_zone=orchestrator.zone_membership.is_in_zone(request.zone, request.point),
        fee=breakdown,
    )


@router.post(
    "/partners/cost",
    response_model=PartnerCostResponse,
    responses={
        422: {"model": ErrorResponse, "description": "No quote available"},
    },
    summary="Partner delivery cost",
)
async def partner_cost(
    request: PartnerCostRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator_dep),
) -> PartnerCostResponse:
    try:
        cost = orchestrator.partner_pricing.quote_cost(
            request.partner,
            request.service_type,
            request.distance_km,
            weight=request.weight,
        )
    except ServiceUnavailable as e:
        logger.info(f"No quote available: {e}")
        raise HTTPException(
            status_code=422,
            detail=f"No quote available: {e}"
        )

    return PartnerCostResponse(
        partner_id=request.partner.id,
        service_type=request.service_type,
        distance_km=request.distance_km,
        weight=request.weight,
        cost=cost,
    )


@router.post(
    "/partners/search",
    response_model=PartnerSearchResponse,
    summary="Search partner candidates",
)
async def search_partners(
    request: PartnerSearchRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator_dep),
) -> PartnerSearchResponse:
    candidates, rejected = orchestrator.partner_search.filter_candidates(
        request.partners, request.city, request.state, request.service_type
    )
    return PartnerSearchResponse(
        candidates=candidates,
        rejected=[RejectedPartnerSchema(**r) for r in rejected],
        total_results=len(candidates),
    )


@router.post(
    "/partners/performance",
    response_model=PerformanceStats,
    summary="Record a completed delivery",
    description="Returns the partner's updated performance metrics.",
)
async def record_partner_delivery(request: DeliveryRecordRequest) -> PerformanceStats:
    return record_delivery(
        request.performance,
        request.delivery_time_minutes,
        request.was_successful,
    )


@router.post(
    "/partners/reviews",
    response_model=PartnerRating,
    summary="Record a partner review",
    description="Returns the partner's updated rating with the new review appended.",
)
async def record_partner_review(request: ReviewRecordRequest) -> PartnerRating:
    return record_review(
        request.rating,
        request.user_id,
        request.rating_value,
        request.comment,
    )


@router.get(
    "/health",
    summary="Health check for the logistics module",
)
async def health_check():
    """
    Health check endpoint for the logistics module.

    Returns:
        Dict with module status and component availability
    """
    try:
        orchestrator = get_orchestrator_dep()

        components = {
            "zone_membership": orchestrator.zone_membership is not None,
            "zone_pricing": orchestrator.zone_pricing is not None,
            "partner_search": orchestrator.partner_search is not None,
            "partner_pricing": orchestrator.partner_pricing is not None,
        }

        all_ok = all(components.values())

        return {
            "status": "healthy" if all_ok else "degraded",
            "module": "logistics_matching",
            "zone_membership_mode": orchestrator.zone_membership.mode.value,
            "components": components,
        }

    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "module": "logistics_matching",
            "error": str(e)
        }
