"""
Partner Statistics

Pure transforms producing a partner's (or zone's) updated running metrics
after a delivery or a review. Inputs are never mutated; persisting the
returned value is up to the caller.
"""

import logging
from datetime import datetime
from typing import Optional

from .schemas import PerformanceStats, PartnerRating, Review, ZoneStatistics

logger = logging.getLogger(__name__)


def running_mean(previous_mean: float, count: int, value: float) -> float:
    """
    Mean after adding `value` as the `count`-th observation.

    Args:
        previous_mean: Mean over the first count - 1 observations
        count: Number of observations including the new one (>= 1)
        value: New observation
    """
    return (previous_mean * (count - 1) + value) / count


def on_time_delivery_rate(successful_deliveries: int, total_deliveries: int) -> float:
    """
    On-time delivery rate in percent.

    Currently the share of successful deliveries: no delivery time is
    compared against a service level.
    """
    if total_deliveries == 0:
        return 0.0
    return successful_deliveries / total_deliveries * 100


def record_delivery(
    stats: PerformanceStats,
    delivery_time_minutes: float,
    was_successful: bool
) -> PerformanceStats:
    """
    Account for one completed delivery.

    Every delivery, successful or not, counts toward the average time.

    Args:
        stats: Current performance metrics
        delivery_time_minutes: Time taken by this delivery
        was_successful: Whether the delivery succeeded

    Returns:
        New PerformanceStats
    """
    total = stats.total_deliveries + 1
    successful = stats.successful_deliveries + (1 if was_successful else 0)

    updated = stats.model_copy(update={
        "total_deliveries": total,
        "successful_deliveries": successful,
        "average_delivery_time_minutes": running_mean(
            stats.average_delivery_time_minutes, total, delivery_time_minutes
        ),
        "on_time_delivery_rate_percent": on_time_delivery_rate(successful, total),
    })

    logger.debug(
        f"Delivery recorded: total={total}, successful={successful}, "
        f"avg_time={updated.average_delivery_time_minutes:.1f} min"
    )

    return updated


def record_review(
    rating: PartnerRating,
    user_id: str,
    rating_value: int,
    comment: Optional[str] = None,
    timestamp: Optional[datetime] = None
) -> PartnerRating:
    """
    Append a review and recompute the partner's reputation.

    The average is recomputed over all stored reviews, so the result does
    not depend on the order in which reviews arrived.

    Args:
        rating: Current rating aggregate
        user_id: Reviewer
        rating_value: Stars, 1 to 5
        comment: Free text
        timestamp: Review date (default: now)

    Returns:
        New PartnerRating (reviews in arrival order, average, total_ratings)

    Raises:
        pydantic.ValidationError: rating_value outside 1-5
    """
    review = Review(
        user_id=user_id,
        rating=rating_value,
        comment=comment,
        timestamp=timestamp or datetime.utcnow(),
    )
    reviews = list(rating.reviews) + [review]

    average = sum(r.rating for r in reviews) / len(reviews)

    logger.debug(f"Review from {user_id}: {rating_value}/5, new average {average:.2f}")

    return PartnerRating(
        average=average,
        total_ratings=len(reviews),
        reviews=reviews,
    )


def record_zone_delivery(
    statistics: ZoneStatistics,
    delivery_time_minutes: float,
    customer_rating: Optional[float] = None
) -> ZoneStatistics:
    """
    Account for one delivery completed inside a zone.

    The customer rating, when given, is folded in as a running mean over
    the rated deliveries only; unrated deliveries leave it unchanged.
    """
    total = statistics.total_deliveries + 1

    update = {
        "total_deliveries": total,
        "average_delivery_time_minutes": running_mean(
            statistics.average_delivery_time_minutes, total, delivery_time_minutes
        ),
    }
    if customer_rating is not None:
        rated = statistics.rated_deliveries + 1
        update["rated_deliveries"] = rated
        update["customer_rating"] = running_mean(
            statistics.customer_rating, rated, customer_rating
        )

    return statistics.model_copy(update=update)
