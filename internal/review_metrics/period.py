"""Rolling-window selection of reviews.

A window of N days starts at midnight N days before today (in the timezone
of ``now``) and includes that instant; the all-time key 0 has no cutoff.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence, TypeVar

from internal.review.type import Review
from .constant import PERIOD_ALL_TIME, PERIOD_DEFINITIONS, PERIOD_KEYS

R = TypeVar("R", bound=Review)


def get_all_periods() -> list[int]:
    return list(PERIOD_KEYS)


def get_period_label(period_key: int) -> str:
    _ensure_known(period_key)
    return PERIOD_DEFINITIONS[period_key]


def get_cutoff(period_key: int, now: Optional[datetime] = None) -> Optional[datetime]:
    """Earliest published timestamp included in the window, None for all time."""
    _ensure_known(period_key)
    if period_key == PERIOD_ALL_TIME:
        return None

    now = as_aware(now or datetime.now(timezone.utc))
    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start_of_today - timedelta(days=period_key)


def filter_by_period(
    reviews: Sequence[R], period_key: int, now: Optional[datetime] = None
) -> list[R]:
    cutoff = get_cutoff(period_key, now)
    if cutoff is None:
        return list(reviews)
    return [r for r in reviews if as_aware(r.published_at) >= cutoff]


def hours_between(start: datetime, end: datetime) -> float:
    """Signed hours from ``start`` to ``end``."""
    return (as_aware(end) - as_aware(start)).total_seconds() / 3600


def as_aware(value: datetime) -> datetime:
    # Naive timestamps from the store are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _ensure_known(period_key: int) -> None:
    if period_key not in PERIOD_DEFINITIONS:
        raise ValueError(
            f"Unknown period key: {period_key}. Must be one of {list(PERIOD_KEYS)}"
        )


__all__ = [
    "get_all_periods",
    "get_period_label",
    "get_cutoff",
    "filter_by_period",
    "hours_between",
    "as_aware",
]
