"""Facebook-only metrics: recommendations, engagement, tags.

Facebook has no star rating. Its dashboard rating is a star equivalent of
the recommendation rate, and both composite scores are clamped to 0..100.
"""

import math
from typing import Any, Sequence

from internal.review.type import Review
from ..constant import DEFAULT_TAG_LIMIT, SCORE_MIN, SCORE_MAX
from .helpers import clamp


def calculate_recommendation_metrics(reviews: Sequence[Review]) -> dict[str, Any]:
    recommended = sum(1 for r in reviews if r.payload.is_recommended is True)
    not_recommended = sum(1 for r in reviews if r.payload.is_recommended is False)
    answered = recommended + not_recommended
    return {
        "total_reviews": len(reviews),
        "recommended": recommended,
        "not_recommended": not_recommended,
        "recommendation_rate": recommended / answered * 100 if answered else 0.0,
    }


def calculate_engagement_metrics(reviews: Sequence[Review]) -> dict[str, Any]:
    total = len(reviews)
    likes = sum(max(r.payload.likes, 0) for r in reviews)
    comments = sum(max(r.payload.comments, 0) for r in reviews)
    photos = sum(max(r.metadata.photo_count, 0) for r in reviews)
    return {
        "total_likes": likes,
        "total_comments": comments,
        "total_photos": photos,
        "average_likes": likes / total if total else 0.0,
        "average_comments": comments / total if total else 0.0,
    }


def calculate_tag_frequency(
    reviews: Sequence[Review], limit: int = DEFAULT_TAG_LIMIT
) -> list[dict[str, Any]]:
    stats: dict[str, dict[str, float]] = {}
    for review in reviews:
        for tag in review.payload.tags:
            normalized = tag.strip().lower()
            if not normalized:
                continue
            entry = stats.setdefault(
                normalized,
                {"count": 0, "recommended": 0, "sentiment_sum": 0.0, "sentiment_count": 0},
            )
            entry["count"] += 1
            if review.payload.is_recommended:
                entry["recommended"] += 1
            sentiment = review.metadata.sentiment
            if sentiment is not None and math.isfinite(sentiment):
                entry["sentiment_sum"] += sentiment
                entry["sentiment_count"] += 1

    ranked = sorted(stats.items(), key=lambda item: item[1]["count"], reverse=True)
    return [
        {
            "tag": tag,
            "count": entry["count"],
            "recommendation_rate": entry["recommended"] / entry["count"] * 100,
            "average_sentiment": (
                entry["sentiment_sum"] / entry["sentiment_count"]
                if entry["sentiment_count"]
                else 0.0
            ),
        }
        for tag, entry in ranked[:limit]
    ]


def recommendation_rate_to_stars(recommendation_rate: float) -> float:
    """0% maps to 1 star, 100% to 5 stars."""
    return 1 + recommendation_rate / 100 * 4


def calculate_engagement_score(
    total_reviews: int,
    total_likes: int,
    total_comments: int,
    total_photos: int,
    response_rate_percent: float,
) -> float:
    if total_reviews == 0:
        return 0.0
    engagement_rate = (total_likes + total_comments) / total_reviews
    photo_rate = total_photos / total_reviews
    response_rate = response_rate_percent / 100
    score = engagement_rate * 50 + photo_rate * 25 + response_rate * 25
    return clamp(score, SCORE_MIN, SCORE_MAX)


def calculate_virality_score(
    average_likes: float,
    average_comments: float,
    recommendation_rate_percent: float,
) -> float:
    score = (
        average_likes * 30
        + average_comments * 40
        + recommendation_rate_percent / 100 * 30
    )
    return clamp(score, SCORE_MIN, SCORE_MAX)


def build_metrics(
    reviews: Sequence[Review],
    response_rate_percent: float,
    tag_limit: int = DEFAULT_TAG_LIMIT,
) -> dict[str, Any]:
    recommendation = calculate_recommendation_metrics(reviews)
    engagement = calculate_engagement_metrics(reviews)
    rate = recommendation["recommendation_rate"]
    return {
        "recommendation": recommendation,
        "engagement": engagement,
        "engagement_score": calculate_engagement_score(
            len(reviews),
            engagement["total_likes"],
            engagement["total_comments"],
            engagement["total_photos"],
            response_rate_percent,
        ),
        "virality_score": calculate_virality_score(
            engagement["average_likes"], engagement["average_comments"], rate
        ),
        "star_equivalent": recommendation_rate_to_stars(rate) if reviews else None,
        "top_tags": calculate_tag_frequency(reviews, tag_limit),
    }


__all__ = [
    "calculate_recommendation_metrics",
    "calculate_engagement_metrics",
    "calculate_tag_frequency",
    "recommendation_rate_to_stars",
    "calculate_engagement_score",
    "calculate_virality_score",
    "build_metrics",
]
