"""Google-only metrics: sub-rating averages."""

from typing import Any, Sequence

from internal.review.constant import SUB_RATING_FIELDS
from internal.review.type import Review
from .helpers import average_sub_ratings


def calculate_sub_ratings(reviews: Sequence[Review]) -> dict[str, Any]:
    return average_sub_ratings([r.payload.sub_ratings for r in reviews], SUB_RATING_FIELDS)


def build_metrics(reviews: Sequence[Review]) -> dict[str, Any]:
    return {"sub_ratings": calculate_sub_ratings(reviews)}


__all__ = ["calculate_sub_ratings", "build_metrics"]
