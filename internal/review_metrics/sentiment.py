"""Per-platform sentiment split.

Google and TripAdvisor prefer an upstream score and fall back to the star
rating. Booking.com uses fixed bands on its 1-10 rating. Facebook only has
recommend / not recommend, so it has no neutral bucket.
"""

import math
from typing import Iterable, Optional, Sequence

from internal.review.constant import Platform
from internal.review.type import Review
from .constant import *
from .histogram import round_half_up
from .interface import ISentimentScorer
from .type import SentimentCounts


def calculate_sentiment_score(positive: int, negative: int, total: int) -> float:
    """Net sentiment in [-100, 100]; 0 when nothing was classified."""
    if total == 0:
        return 0.0
    return (positive - negative) / total * 100


def classify_score(
    score: float,
    positive_threshold: float = DEFAULT_POSITIVE_THRESHOLD,
    negative_threshold: float = DEFAULT_NEGATIVE_THRESHOLD,
) -> str:
    if score >= positive_threshold:
        return LABEL_POSITIVE
    if score <= negative_threshold:
        return LABEL_NEGATIVE
    return LABEL_NEUTRAL


def classify_five_star(rating: Optional[float]) -> Optional[str]:
    if not _is_number(rating) or not 1 <= rating <= 5:
        return None
    rounded = round_half_up(rating)
    if rounded >= FIVE_STAR_POSITIVE_MIN:
        return LABEL_POSITIVE
    if rounded == FIVE_STAR_NEUTRAL:
        return LABEL_NEUTRAL
    return LABEL_NEGATIVE


def classify_booking(rating: Optional[float]) -> Optional[str]:
    if not _is_number(rating) or not 1 <= rating <= 10:
        return None
    if rating >= BOOKING_POSITIVE_MIN:
        return LABEL_POSITIVE
    if rating >= BOOKING_NEUTRAL_MIN:
        return LABEL_NEUTRAL
    return LABEL_NEGATIVE


def classify_recommendation(is_recommended: Optional[bool]) -> Optional[str]:
    if is_recommended is None:
        return None
    return LABEL_POSITIVE if is_recommended else LABEL_NEGATIVE


def summarize(labels: Iterable[Optional[str]], has_neutral: bool = True) -> SentimentCounts:
    """Count labels; None labels (unclassifiable reviews) are left out of total."""
    positive = neutral = negative = 0
    for label in labels:
        if label == LABEL_POSITIVE:
            positive += 1
        elif label == LABEL_NEGATIVE:
            negative += 1
        elif label == LABEL_NEUTRAL and has_neutral:
            neutral += 1

    total = positive + neutral + negative
    return SentimentCounts(
        positive=positive,
        neutral=neutral if has_neutral else None,
        negative=negative,
        total=total,
        score=calculate_sentiment_score(positive, negative, total),
    )


def classify_scored_review(
    review: Review,
    scorer: Optional[ISentimentScorer] = None,
    positive_threshold: float = DEFAULT_POSITIVE_THRESHOLD,
    negative_threshold: float = DEFAULT_NEGATIVE_THRESHOLD,
) -> Optional[str]:
    """Label a Google/TripAdvisor review: upstream score, then scorer, then rating."""
    score = review.metadata.sentiment
    if not _is_number(score) and scorer is not None and review.text:
        score = scorer.score(review.text)

    if _is_number(score):
        return classify_score(score, positive_threshold, negative_threshold)
    return classify_five_star(review.rating)


def analyze_sentiment(
    platform: Platform,
    reviews: Sequence[Review],
    scorer: Optional[ISentimentScorer] = None,
    positive_threshold: float = DEFAULT_POSITIVE_THRESHOLD,
    negative_threshold: float = DEFAULT_NEGATIVE_THRESHOLD,
) -> SentimentCounts:
    if platform == Platform.FACEBOOK:
        return summarize(
            (classify_recommendation(r.payload.is_recommended) for r in reviews),
            has_neutral=False,
        )

    if platform == Platform.BOOKING:
        return summarize(classify_booking(r.rating) for r in reviews)

    return summarize(
        classify_scored_review(r, scorer, positive_threshold, negative_threshold)
        for r in reviews
    )


def _is_number(value) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


__all__ = [
    "calculate_sentiment_score",
    "classify_score",
    "classify_five_star",
    "classify_booking",
    "classify_recommendation",
    "classify_scored_review",
    "summarize",
    "analyze_sentiment",
]
