"""Data types for the review analytics run."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
import uuid

from internal.review.constant import Platform
from internal.review_metrics.constant import (
    DEFAULT_KEYWORD_LIMIT,
    BOOKING_KEYWORD_LIMIT,
    DEFAULT_TOP_LIST_LIMIT,
    DEFAULT_TAG_LIMIT,
    DEFAULT_POSITIVE_THRESHOLD,
    DEFAULT_NEGATIVE_THRESHOLD,
)

from .constant import *


@dataclass
class Config:
    """Configuration for one platform's analytics service.

    ``keyword_limit`` and ``rating_drop_threshold`` default per platform
    when left as None.
    """

    platform: Platform
    keyword_limit: Optional[int] = None
    top_list_limit: int = DEFAULT_TOP_LIST_LIMIT
    tag_limit: int = DEFAULT_TAG_LIMIT
    positive_threshold: float = DEFAULT_POSITIVE_THRESHOLD
    negative_threshold: float = DEFAULT_NEGATIVE_THRESHOLD
    extra_stop_words: list[str] = field(default_factory=list)
    rating_drop_threshold: Optional[float] = None
    recommendation_drop_threshold: float = DEFAULT_RECOMMENDATION_DROP
    milestones: list[int] = field(default_factory=lambda: list(DEFAULT_MILESTONES))

    def __post_init__(self):
        self.platform = Platform(self.platform)
        booking = self.platform == Platform.BOOKING

        if self.keyword_limit is None:
            self.keyword_limit = BOOKING_KEYWORD_LIMIT if booking else DEFAULT_KEYWORD_LIMIT
        if self.rating_drop_threshold is None:
            self.rating_drop_threshold = (
                DEFAULT_BOOKING_RATING_DROP if booking else DEFAULT_RATING_DROP
            )

        if self.keyword_limit <= 0:
            raise ValueError("keyword_limit must be > 0")
        if self.top_list_limit <= 0:
            raise ValueError("top_list_limit must be > 0")
        if self.tag_limit <= 0:
            raise ValueError("tag_limit must be > 0")
        if self.negative_threshold >= self.positive_threshold:
            raise ValueError("negative_threshold must be below positive_threshold")


@dataclass
class Input:
    """Input for one run: a business profile and an optional clock reading."""

    business_profile_id: str
    now: Optional[datetime] = None

    def __post_init__(self):
        if not self.business_profile_id or not self.business_profile_id.strip():
            raise ValueError("business_profile_id is required")


@dataclass
class Alert:
    type: str
    message: str
    previous: Optional[float] = None
    current: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "message": self.message,
            "previous": self.previous,
            "current": self.current,
        }


@dataclass
class Output:
    """Result of one run.

    ``skipped`` is True when the profile had no reviews and an overview
    already existed, so nothing was written.
    """

    business_profile_id: str
    platform: Platform
    total_reviews: int = 0
    overview_id: Optional[uuid.UUID] = None
    periods_written: list[int] = field(default_factory=list)
    failed_periods: dict[int, str] = field(default_factory=dict)
    alerts: list[Alert] = field(default_factory=list)
    skipped: bool = False


@dataclass
class AnalyticsSummary:
    business_profile_id: str
    platform: Platform
    total_reviews: int
    average_rating: Optional[float]
    sentiment_score: float
    last_updated: Optional[datetime]


__all__ = [
    "Config",
    "Input",
    "Alert",
    "Output",
    "AnalyticsSummary",
]
