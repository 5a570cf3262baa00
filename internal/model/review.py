"""ORM model for analytics.review table.

Reviews from every platform share one table. Columns hold the fields every
platform has; ``platform_data`` holds the platform-only fields (sub-ratings,
trip type, stay details, Facebook counters and tags) and ``review_metadata``
holds upstream enrichment (keywords, sentiment score, reply).

Table: analytics.review
Schema: analytics
"""

from sqlalchemy import (
    Column,
    String,
    Float,
    Boolean,
    Text,
    DateTime,
    Index,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from .base import Base
from .constant import POSTGRES_SCHEMA


class Review(Base):
    __tablename__ = "review"
    __table_args__ = (
        Index("idx_review_profile_platform", "business_profile_id", "platform"),
        Index("idx_review_published", "published_at"),
        {"schema": POSTGRES_SCHEMA},
    )

    id = Column(String(255), primary_key=True)
    business_profile_id = Column(String(255), nullable=False)
    platform = Column(String(20), nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=False)

    text = Column(Text, nullable=True)
    response_text = Column(Text, nullable=True)
    response_date = Column(DateTime(timezone=True), nullable=True)

    # Native scale: 1-5, or 1-10 for Booking.com; null for Facebook
    rating = Column(Float, nullable=True)
    is_recommended = Column(Boolean, nullable=True)

    review_metadata = Column(JSONB, nullable=False, server_default="{}")
    platform_data = Column(JSONB, nullable=False, server_default="{}")

    created_at = Column(DateTime(timezone=True), server_default=func.now())


__all__ = ["Review"]
