import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from internal.model.business_profile import BusinessProfile as BusinessProfileModel
from internal.model.review import Review as ReviewModel
from ...constant import Platform, SUB_RATING_FIELDS, BOOKING_SUB_RATING_FIELDS
from ...type import (
    Review,
    ReviewMetadata,
    BusinessProfile,
    SubRatings,
    BookingSubRatings,
    GooglePayload,
    TripAdvisorPayload,
    FacebookPayload,
    BookingPayload,
)


def transform_to_review(row: ReviewModel) -> Review:
    """Map a review row to the domain type.

    Malformed optional values become None. Raises ValueError when the row
    cannot form a review at all (unknown platform, no id).
    """
    platform = Platform(row.platform)
    platform_data = row.platform_data or {}

    return Review(
        id=row.id,
        business_profile_id=row.business_profile_id,
        platform=platform,
        published_at=_parse_datetime(row.published_at),
        payload=_build_payload(platform, row, platform_data),
        text=row.text,
        response_text=row.response_text,
        response_date=_parse_datetime(row.response_date),
        metadata=_build_metadata(row.review_metadata or {}),
    )


def transform_to_business_profile(row: BusinessProfileModel) -> BusinessProfile:
    return BusinessProfile(
        id=row.id,
        platform=Platform(row.platform),
        display_name=row.display_name,
        team_id=row.team_id,
    )


def _build_payload(platform: Platform, row: ReviewModel, data: Dict[str, Any]):
    if platform == Platform.GOOGLE:
        return GooglePayload(
            rating=_opt_float(row.rating),
            sub_ratings=_build_sub_ratings(data),
        )

    if platform == Platform.TRIPADVISOR:
        return TripAdvisorPayload(
            rating=_opt_float(row.rating),
            sub_ratings=_build_sub_ratings(data),
            trip_type=_opt_str(_pick(data, "trip_type", "tripType")),
            helpful_votes=_opt_int(_pick(data, "helpful_votes", "helpfulVotes")) or 0,
            room_tip=_opt_str(_pick(data, "room_tip", "roomTip")),
        )

    if platform == Platform.FACEBOOK:
        tags = _pick(data, "tags") or []
        return FacebookPayload(
            is_recommended=row.is_recommended,
            likes=_opt_int(_pick(data, "likes", "likesCount")) or 0,
            comments=_opt_int(_pick(data, "comments", "commentsCount")) or 0,
            tags=[tag for tag in tags if _opt_str(tag)] if isinstance(tags, list) else [],
        )

    sub = _pick(data, "sub_ratings", "subRatings") or {}
    return BookingPayload(
        rating=_opt_float(row.rating),
        sub_ratings=BookingSubRatings(
            **{name: _opt_float(_pick(sub, name, _camel(name))) for name in BOOKING_SUB_RATING_FIELDS}
        ),
        guest_type=_opt_str(_pick(data, "guest_type", "guestType")),
        length_of_stay=_opt_int(_pick(data, "length_of_stay", "lengthOfStay")),
        room_type=_opt_str(_pick(data, "room_type", "roomType")),
        nationality=_opt_str(_pick(data, "nationality", "reviewerNationality")),
        is_verified_stay=bool(_pick(data, "is_verified_stay", "isVerifiedStay")),
        stay_date=_parse_datetime(_pick(data, "stay_date", "stayDate")),
    )


def _build_sub_ratings(data: Dict[str, Any]) -> SubRatings:
    sub = _pick(data, "sub_ratings", "subRatings") or {}
    return SubRatings(
        **{name: _opt_float(_pick(sub, name, _camel(name))) for name in SUB_RATING_FIELDS}
    )


def _build_metadata(data: Dict[str, Any]) -> ReviewMetadata:
    keywords = _pick(data, "keywords") or []
    return ReviewMetadata(
        keywords=[k for k in keywords if _opt_str(k)] if isinstance(keywords, list) else [],
        sentiment=_opt_float(_pick(data, "sentiment")),
        reply=_opt_str(_pick(data, "reply")),
        reply_date=_parse_datetime(_pick(data, "reply_date", "replyDate")),
        is_read=bool(_pick(data, "is_read", "isRead")),
        is_important=bool(_pick(data, "is_important", "isImportant")),
        photo_count=_opt_int(_pick(data, "photo_count", "photoCount")) or 0,
        emotional=_opt_str(_pick(data, "emotional")),
    )


def _pick(data: Any, *keys: str) -> Any:
    if not isinstance(data, dict):
        return None
    for key in keys:
        if (val := data.get(key)) is not None:
            return val
    return None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _opt_str(value: Any) -> Optional[str]:
    # JSONB may hold numbers, lists or objects where text is expected
    if isinstance(value, str) and value.strip():
        return value
    return None


def _opt_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _opt_int(value: Any) -> Optional[int]:
    number = _opt_float(value)
    return int(number) if number is not None else None


def _parse_datetime(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except (ValueError, AttributeError):
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


__all__ = [
    "transform_to_review",
    "transform_to_business_profile",
]
