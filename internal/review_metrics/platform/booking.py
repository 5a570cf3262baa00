"""Booking.com-only metrics: sub-ratings, guest mix, stay details."""

from typing import Any, Optional, Sequence

from internal.review.constant import BOOKING_SUB_RATING_FIELDS
from internal.review.type import Review
from ..constant import (
    DEFAULT_TOP_LIST_LIMIT,
    GUEST_TYPE_ALIASES,
    GUEST_TYPES,
    SHORT_STAY_NIGHTS,
    LONG_STAY_NIGHTS,
)
from .helpers import average_sub_ratings, top_values


def classify_guest_type(guest_type: Optional[str]) -> Optional[str]:
    if not guest_type:
        return None
    return GUEST_TYPE_ALIASES.get(guest_type.strip().upper())


def calculate_guest_type_distribution(reviews: Sequence[Review]) -> dict[str, int]:
    counts = {guest_type: 0 for guest_type in GUEST_TYPES}
    for review in reviews:
        if guest_type := classify_guest_type(review.payload.guest_type):
            counts[guest_type] += 1
    counts["families"] = (
        counts["families_with_young_children"] + counts["families_with_older_children"]
    )
    return counts


def calculate_sub_ratings(reviews: Sequence[Review]) -> dict[str, Any]:
    return average_sub_ratings(
        [r.payload.sub_ratings for r in reviews], BOOKING_SUB_RATING_FIELDS
    )


def calculate_stay_length_metrics(reviews: Sequence[Review]) -> dict[str, Any]:
    nights = [
        r.payload.length_of_stay
        for r in reviews
        if r.payload.length_of_stay is not None and r.payload.length_of_stay >= 0
    ]
    return {
        "average_nights": sum(nights) / len(nights) if nights else None,
        "total_nights": sum(nights),
        "short_stays": sum(1 for n in nights if n < SHORT_STAY_NIGHTS),
        "medium_stays": sum(
            1 for n in nights if SHORT_STAY_NIGHTS <= n <= LONG_STAY_NIGHTS
        ),
        "long_stays": sum(1 for n in nights if n > LONG_STAY_NIGHTS),
    }


def build_metrics(
    reviews: Sequence[Review], top_list_limit: int = DEFAULT_TOP_LIST_LIMIT
) -> dict[str, Any]:
    return {
        "sub_ratings": calculate_sub_ratings(reviews),
        "guest_types": calculate_guest_type_distribution(reviews),
        "stay_length": calculate_stay_length_metrics(reviews),
        "top_nationalities": top_values(
            (r.payload.nationality for r in reviews), top_list_limit
        ),
        "popular_room_types": top_values(
            (r.payload.room_type for r in reviews), top_list_limit
        ),
        "verified_stays": sum(1 for r in reviews if r.payload.is_verified_stay),
    }


__all__ = [
    "classify_guest_type",
    "calculate_guest_type_distribution",
    "calculate_sub_ratings",
    "calculate_stay_length_metrics",
    "build_metrics",
]
