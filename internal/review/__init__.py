"""Review domain.

Platform-tagged review records and read access to the scraper's store.
"""

from .constant import *
from .type import (
    Review,
    ReviewMetadata,
    SubRatings,
    BookingSubRatings,
    GooglePayload,
    TripAdvisorPayload,
    FacebookPayload,
    BookingPayload,
    BusinessProfile,
)

__all__ = [
    "Platform",
    "RATING_SCALES",
    "FIVE_STAR_SCALE",
    "BOOKING_SCALE",
    "SUB_RATING_FIELDS",
    "BOOKING_SUB_RATING_FIELDS",
    "Review",
    "ReviewMetadata",
    "SubRatings",
    "BookingSubRatings",
    "GooglePayload",
    "TripAdvisorPayload",
    "FacebookPayload",
    "BookingPayload",
    "BusinessProfile",
]
