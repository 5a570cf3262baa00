"""Review records as read from the scraper's store.

A ``Review`` carries the fields every platform shares and a platform-tagged
payload holding what only that platform provides.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from .constant import *


@dataclass
class ReviewMetadata:
    """Enrichment attached to a review upstream (keywords, sentiment, reply)."""

    keywords: list[str] = field(default_factory=list)
    sentiment: Optional[float] = None
    reply: Optional[str] = None
    reply_date: Optional[datetime] = None
    is_read: bool = False
    is_important: bool = False
    photo_count: int = 0
    emotional: Optional[str] = None


@dataclass
class SubRatings:
    """Optional 1-5 sub-ratings (Google, TripAdvisor)."""

    service: Optional[float] = None
    food: Optional[float] = None
    value: Optional[float] = None
    atmosphere: Optional[float] = None
    cleanliness: Optional[float] = None
    location: Optional[float] = None
    rooms: Optional[float] = None
    sleep_quality: Optional[float] = None


@dataclass
class BookingSubRatings:
    """Optional 1-10 sub-ratings (Booking.com)."""

    cleanliness: Optional[float] = None
    comfort: Optional[float] = None
    location: Optional[float] = None
    facilities: Optional[float] = None
    staff: Optional[float] = None
    value_for_money: Optional[float] = None
    wifi: Optional[float] = None


@dataclass
class GooglePayload:
    rating: Optional[float] = None
    sub_ratings: SubRatings = field(default_factory=SubRatings)


@dataclass
class TripAdvisorPayload:
    rating: Optional[float] = None
    sub_ratings: SubRatings = field(default_factory=SubRatings)
    trip_type: Optional[str] = None
    helpful_votes: int = 0
    room_tip: Optional[str] = None


@dataclass
class FacebookPayload:
    """Facebook recommendations have no numeric rating."""

    is_recommended: Optional[bool] = None
    likes: int = 0
    comments: int = 0
    tags: list[str] = field(default_factory=list)


@dataclass
class BookingPayload:
    rating: Optional[float] = None
    sub_ratings: BookingSubRatings = field(default_factory=BookingSubRatings)
    guest_type: Optional[str] = None
    length_of_stay: Optional[int] = None
    room_type: Optional[str] = None
    nationality: Optional[str] = None
    is_verified_stay: bool = False
    stay_date: Optional[datetime] = None


PlatformPayload = Union[GooglePayload, TripAdvisorPayload, FacebookPayload, BookingPayload]

PAYLOAD_TYPES = {
    Platform.GOOGLE: GooglePayload,
    Platform.TRIPADVISOR: TripAdvisorPayload,
    Platform.FACEBOOK: FacebookPayload,
    Platform.BOOKING: BookingPayload,
}


@dataclass
class Review:
    """One review of one business profile on one platform.

    The rating (when the platform has one) stays on its native scale.
    """

    id: str
    business_profile_id: str
    platform: Platform
    published_at: datetime
    payload: PlatformPayload
    text: Optional[str] = None
    response_text: Optional[str] = None
    response_date: Optional[datetime] = None
    metadata: ReviewMetadata = field(default_factory=ReviewMetadata)

    def __post_init__(self):
        if not self.id:
            raise ValueError("id is required")
        if not self.business_profile_id:
            raise ValueError("business_profile_id is required")
        if not isinstance(self.published_at, datetime):
            raise ValueError("published_at is required")
        self.platform = Platform(self.platform)
        expected = PAYLOAD_TYPES[self.platform]
        if not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.platform.value} review requires {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    @property
    def rating(self) -> Optional[float]:
        return getattr(self.payload, "rating", None)

    @property
    def reply_text(self) -> Optional[str]:
        """Owner response, preferring a non-blank metadata reply."""
        return self._reply()[0]

    @property
    def reply_date(self) -> Optional[datetime]:
        """Date of the reply returned by ``reply_text``."""
        return self._reply()[1]

    def _reply(self) -> tuple[Optional[str], Optional[datetime]]:
        reply = self.metadata.reply
        if reply and reply.strip():
            return reply, self.metadata.reply_date
        return self.response_text, self.response_date


@dataclass
class BusinessProfile:
    id: str
    platform: Platform
    display_name: Optional[str] = None
    team_id: Optional[str] = None


__all__ = [
    "ReviewMetadata",
    "SubRatings",
    "BookingSubRatings",
    "GooglePayload",
    "TripAdvisorPayload",
    "FacebookPayload",
    "BookingPayload",
    "PlatformPayload",
    "PAYLOAD_TYPES",
    "Review",
    "BusinessProfile",
]
