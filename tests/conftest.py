"""Shared fixtures for review analytics tests."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest  # type: ignore

from internal.review.constant import Platform
from internal.review.type import (
    Review,
    ReviewMetadata,
    GooglePayload,
    TripAdvisorPayload,
    FacebookPayload,
    BookingPayload,
)

NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)

_PAYLOADS = {
    Platform.GOOGLE: GooglePayload,
    Platform.TRIPADVISOR: TripAdvisorPayload,
    Platform.FACEBOOK: FacebookPayload,
    Platform.BOOKING: BookingPayload,
}


def build_review(
    platform: Platform = Platform.GOOGLE,
    *,
    id: Optional[str] = None,
    days_ago: float = 0,
    published_at: Optional[datetime] = None,
    text: Optional[str] = None,
    response_text: Optional[str] = None,
    response_date: Optional[datetime] = None,
    metadata: Optional[ReviewMetadata] = None,
    **payload: Any,
) -> Review:
    build_review.counter += 1
    return Review(
        id=id or f"review-{build_review.counter}",
        business_profile_id="profile-1",
        platform=platform,
        published_at=published_at or NOW - timedelta(days=days_ago),
        payload=_PAYLOADS[platform](**payload),
        text=text,
        response_text=response_text,
        response_date=response_date,
        metadata=metadata or ReviewMetadata(),
    )


build_review.counter = 0


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_review():
    """Factory: make_review(platform, days_ago=..., rating=..., ...)."""
    return build_review

