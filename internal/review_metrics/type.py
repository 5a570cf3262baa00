"""Result types produced by the review metric calculators."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .constant import RATING_BUCKETS


@dataclass
class SentimentCounts:
    """Sentiment split over the reviews that could be classified.

    ``neutral`` is None for platforms with a two-way signal (Facebook).
    ``positive + (neutral or 0) + negative == total`` always holds.
    """

    positive: int = 0
    neutral: Optional[int] = 0
    negative: int = 0
    total: int = 0
    score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "positive": self.positive,
            "neutral": self.neutral,
            "negative": self.negative,
            "total": self.total,
            "score": self.score,
        }


@dataclass
class KeywordCount:
    keyword: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"keyword": self.keyword, "count": self.count}


@dataclass
class ResponseMetrics:
    """Owner-response coverage and latency.

    Responses dated before their review still count toward the rate but not
    toward the latency figures; ``excluded_response_times`` counts them.
    """

    total_reviews: int = 0
    responded_count: int = 0
    response_rate: float = 0.0
    average_response_time_hours: Optional[float] = None
    median_response_time_hours: Optional[float] = None
    excluded_response_times: int = 0


def empty_distribution() -> dict[str, int]:
    return {bucket: 0 for bucket in RATING_BUCKETS}


@dataclass
class MetricSnapshot:
    """Every aggregate for one set of reviews (all time or one window)."""

    review_count: int = 0
    average_rating: Optional[float] = None
    rating_distribution: dict[str, int] = field(default_factory=empty_distribution)
    sentiment: SentimentCounts = field(default_factory=SentimentCounts)
    top_keywords: list[KeywordCount] = field(default_factory=list)
    response: ResponseMetrics = field(default_factory=ResponseMetrics)
    platform_metrics: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to the column names shared by the aggregate tables."""
        return {
            "average_rating": self.average_rating,
            "rating_distribution": dict(self.rating_distribution),
            "positive_count": self.sentiment.positive,
            "neutral_count": self.sentiment.neutral,
            "negative_count": self.sentiment.negative,
            "sentiment_total": self.sentiment.total,
            "sentiment_score": self.sentiment.score,
            "top_keywords": [k.to_dict() for k in self.top_keywords],
            "responded_count": self.response.responded_count,
            "response_rate": self.response.response_rate,
            "avg_response_time_hours": self.response.average_response_time_hours,
            "median_response_time_hours": self.response.median_response_time_hours,
            "platform_metrics": self.platform_metrics,
        }


__all__ = [
    "SentimentCounts",
    "KeywordCount",
    "ResponseMetrics",
    "MetricSnapshot",
    "empty_distribution",
]
