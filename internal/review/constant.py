from enum import Enum


class Platform(str, Enum):
    GOOGLE = "google"
    FACEBOOK = "facebook"
    TRIPADVISOR = "tripadvisor"
    BOOKING = "booking"


# Native rating scales (inclusive bounds)
FIVE_STAR_SCALE = (1.0, 5.0)
BOOKING_SCALE = (1.0, 10.0)

RATING_SCALES = {
    Platform.GOOGLE: FIVE_STAR_SCALE,
    Platform.TRIPADVISOR: FIVE_STAR_SCALE,
    Platform.BOOKING: BOOKING_SCALE,
}

# Sub-rating names shared by Google and TripAdvisor (1-5)
SUB_RATING_FIELDS = (
    "service",
    "food",
    "value",
    "atmosphere",
    "cleanliness",
    "location",
    "rooms",
    "sleep_quality",
)

# Booking.com sub-ratings (1-10)
BOOKING_SUB_RATING_FIELDS = (
    "cleanliness",
    "comfort",
    "location",
    "facilities",
    "staff",
    "value_for_money",
    "wifi",
)

__all__ = [
    "Platform",
    "FIVE_STAR_SCALE",
    "BOOKING_SCALE",
    "RATING_SCALES",
    "SUB_RATING_FIELDS",
    "BOOKING_SUB_RATING_FIELDS",
]
