"""ORM model for analytics.business_profile table.

A business location as registered on one review platform. Rows are owned by
the scraper; the analytics engine only reads them.
"""

from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.sql import func

from .base import Base
from .constant import POSTGRES_SCHEMA


class BusinessProfile(Base):
    __tablename__ = "business_profile"
    __table_args__ = (
        Index("idx_business_profile_platform", "platform"),
        Index("idx_business_profile_team", "team_id"),
        {"schema": POSTGRES_SCHEMA},
    )

    id = Column(String(255), primary_key=True)
    platform = Column(String(20), nullable=False)
    display_name = Column(String(255), nullable=True)
    team_id = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


__all__ = ["BusinessProfile"]
