"""TripAdvisor-only metrics.

Trip types are free text; each review counts toward the first category
whose pattern appears in it and unmatched values are ignored.
"""

from typing import Any, Optional, Sequence

from internal.review.constant import SUB_RATING_FIELDS
from internal.review.type import Review
from ..constant import TRIP_TYPE_PATTERNS
from .helpers import average_sub_ratings


def classify_trip_type(trip_type: Optional[str]) -> Optional[str]:
    if not trip_type:
        return None
    lowered = trip_type.lower()
    for category, patterns in TRIP_TYPE_PATTERNS:
        if any(p in lowered for p in patterns):
            return category
    return None


def calculate_trip_type_distribution(reviews: Sequence[Review]) -> dict[str, int]:
    counts = {category: 0 for category, _ in TRIP_TYPE_PATTERNS}
    for review in reviews:
        if category := classify_trip_type(review.payload.trip_type):
            counts[category] += 1
    return counts


def calculate_sub_ratings(reviews: Sequence[Review]) -> dict[str, Any]:
    return average_sub_ratings([r.payload.sub_ratings for r in reviews], SUB_RATING_FIELDS)


def calculate_helpful_votes(reviews: Sequence[Review]) -> dict[str, Any]:
    total = sum(max(r.payload.helpful_votes, 0) for r in reviews)
    return {
        "total": total,
        "average": total / len(reviews) if reviews else 0.0,
    }


def count_reviews_with_photos(reviews: Sequence[Review]) -> int:
    return sum(1 for r in reviews if r.metadata.photo_count > 0)


def count_reviews_with_room_tips(reviews: Sequence[Review]) -> int:
    return sum(1 for r in reviews if r.payload.room_tip and r.payload.room_tip.strip())


def build_metrics(reviews: Sequence[Review]) -> dict[str, Any]:
    return {
        "sub_ratings": calculate_sub_ratings(reviews),
        "trip_types": calculate_trip_type_distribution(reviews),
        "helpful_votes": calculate_helpful_votes(reviews),
        "reviews_with_photos": count_reviews_with_photos(reviews),
        "reviews_with_room_tips": count_reviews_with_room_tips(reviews),
    }


__all__ = [
    "classify_trip_type",
    "calculate_trip_type_distribution",
    "calculate_sub_ratings",
    "calculate_helpful_votes",
    "count_reviews_with_photos",
    "count_reviews_with_room_tips",
    "build_metrics",
]
