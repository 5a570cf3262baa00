from .base import Base
from .business_profile import BusinessProfile
from .review import Review
from .overview import ReviewOverview, ReviewPeriodicalMetric

__all__ = [
    "Base",
    "BusinessProfile",
    "Review",
    "ReviewOverview",
    "ReviewPeriodicalMetric",
]
