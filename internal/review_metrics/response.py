"""Owner-response rate and latency."""

import statistics
from typing import Optional, Sequence

from internal.review.type import Review
from .period import hours_between
from .type import ResponseMetrics


def has_response(review: Review) -> bool:
    reply = review.reply_text
    return bool(reply and reply.strip())


def response_time_hours(review: Review) -> Optional[float]:
    """Hours from publication to reply; None when the reply has no date."""
    if not has_response(review) or review.reply_date is None:
        return None
    return hours_between(review.published_at, review.reply_date)


def calculate_response_rate(responded: int, total: int) -> float:
    if total == 0:
        return 0.0
    return responded / total * 100


def calculate_response_metrics(reviews: Sequence[Review]) -> ResponseMetrics:
    responded = 0
    latencies: list[float] = []
    excluded = 0

    for review in reviews:
        if not has_response(review):
            continue
        responded += 1

        hours = response_time_hours(review)
        if hours is None:
            continue
        if hours < 0:
            # Reply dated before the review: counted as answered, not timed
            excluded += 1
            continue
        latencies.append(hours)

    return ResponseMetrics(
        total_reviews=len(reviews),
        responded_count=responded,
        response_rate=calculate_response_rate(responded, len(reviews)),
        average_response_time_hours=(
            sum(latencies) / len(latencies) if latencies else None
        ),
        median_response_time_hours=statistics.median(latencies) if latencies else None,
        excluded_response_times=excluded,
    )


__all__ = [
    "has_response",
    "response_time_hours",
    "calculate_response_rate",
    "calculate_response_metrics",
]
