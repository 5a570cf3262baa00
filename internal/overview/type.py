"""Data types for the dashboard aggregate rows."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
import uuid

from internal.review.constant import Platform


@dataclass
class Overview:
    """Stored all-time aggregates for one (platform, business profile)."""

    id: uuid.UUID
    platform: Platform
    business_profile_id: str
    total_reviews: int = 0
    average_rating: Optional[float] = None
    sentiment_score: float = 0.0
    response_rate: float = 0.0
    platform_metrics: dict[str, Any] = field(default_factory=dict)
    last_updated: Optional[datetime] = None


@dataclass
class OverviewData:
    """Values written to the overview row; keyed by platform and profile."""

    platform: Platform
    business_profile_id: str
    total_reviews: int
    metrics: dict[str, Any]
    last_updated: datetime

    def __post_init__(self):
        if not self.business_profile_id:
            raise ValueError("business_profile_id is required")
        if self.total_reviews < 0:
            raise ValueError("total_reviews must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": Platform(self.platform).value,
            "business_profile_id": self.business_profile_id,
            "total_reviews": self.total_reviews,
            "last_updated": self.last_updated,
            **self.metrics,
        }


@dataclass
class PeriodicalMetricData:
    """Values written to one period row; keyed by overview id and period."""

    overview_id: uuid.UUID
    period_key: int
    period_label: str
    review_count: int
    metrics: dict[str, Any]
    computed_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "overview_id": self.overview_id,
            "period_key": self.period_key,
            "period_label": self.period_label,
            "review_count": self.review_count,
            "computed_at": self.computed_at,
            **self.metrics,
        }


__all__ = [
    "Overview",
    "OverviewData",
    "PeriodicalMetricData",
]
