"""ORM models for the dashboard aggregate tables.

- analytics.review_overview: all-time aggregates, one row per
  (platform, business_profile_id)
- analytics.review_periodical_metric: the same aggregates scoped to a rolling
  window, one row per (overview_id, period_key)

Both are rewritten in place on every run.
"""

from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    DateTime,
    ForeignKey,
    Index,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from .base import Base
from .constant import POSTGRES_SCHEMA


class ReviewOverview(Base):
    __tablename__ = "review_overview"
    __table_args__ = (
        UniqueConstraint(
            "platform", "business_profile_id", name="uq_review_overview_profile"
        ),
        Index("idx_review_overview_profile", "business_profile_id"),
        {"schema": POSTGRES_SCHEMA},
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    platform = Column(String(20), nullable=False)
    business_profile_id = Column(String(255), nullable=False)

    total_reviews = Column(Integer, nullable=False, server_default="0")
    average_rating = Column(Float, nullable=True)
    rating_distribution = Column(JSONB, nullable=False, server_default="{}")

    # Sentiment (neutral is null for Facebook)
    positive_count = Column(Integer, nullable=False, server_default="0")
    neutral_count = Column(Integer, nullable=True)
    negative_count = Column(Integer, nullable=False, server_default="0")
    sentiment_total = Column(Integer, nullable=False, server_default="0")
    sentiment_score = Column(Float, nullable=False, server_default="0.0")

    top_keywords = Column(JSONB, nullable=False, server_default="[]")

    # Owner responses
    responded_count = Column(Integer, nullable=False, server_default="0")
    response_rate = Column(Float, nullable=False, server_default="0.0")
    avg_response_time_hours = Column(Float, nullable=True)
    median_response_time_hours = Column(Float, nullable=True)

    platform_metrics = Column(JSONB, nullable=False, server_default="{}")

    last_updated = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class ReviewPeriodicalMetric(Base):
    __tablename__ = "review_periodical_metric"
    __table_args__ = (
        UniqueConstraint(
            "overview_id", "period_key", name="uq_review_periodical_metric_period"
        ),
        {"schema": POSTGRES_SCHEMA},
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    overview_id = Column(
        UUID(as_uuid=True),
        ForeignKey(f"{POSTGRES_SCHEMA}.review_overview.id", ondelete="CASCADE"),
        nullable=False,
    )
    period_key = Column(Integer, nullable=False)
    period_label = Column(String(50), nullable=False)

    review_count = Column(Integer, nullable=False, server_default="0")
    average_rating = Column(Float, nullable=True)
    rating_distribution = Column(JSONB, nullable=False, server_default="{}")

    positive_count = Column(Integer, nullable=False, server_default="0")
    neutral_count = Column(Integer, nullable=True)
    negative_count = Column(Integer, nullable=False, server_default="0")
    sentiment_total = Column(Integer, nullable=False, server_default="0")
    sentiment_score = Column(Float, nullable=False, server_default="0.0")

    top_keywords = Column(JSONB, nullable=False, server_default="[]")

    responded_count = Column(Integer, nullable=False, server_default="0")
    response_rate = Column(Float, nullable=False, server_default="0.0")
    avg_response_time_hours = Column(Float, nullable=True)
    median_response_time_hours = Column(Float, nullable=True)

    platform_metrics = Column(JSONB, nullable=False, server_default="{}")

    computed_at = Column(DateTime(timezone=True), nullable=False)


__all__ = ["ReviewOverview", "ReviewPeriodicalMetric"]
