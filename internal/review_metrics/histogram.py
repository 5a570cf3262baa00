"""Rating histogram on the canonical 1-5 buckets.

Both scales bucket by rounding half up and clamping into 1..5. Booking.com's
1-10 ratings are not rescaled first, so every Booking rating of 5 or more
lands in bucket "5".
"""

import math
from typing import Iterable, Optional, Sequence

from internal.review.constant import FIVE_STAR_SCALE
from .constant import MIN_BUCKET, MAX_BUCKET
from .type import empty_distribution


def round_half_up(value: float) -> int:
    # round() is banker's rounding and would send 8.5 to 8
    return math.floor(value + 0.5)


def to_bucket(rating: float) -> str:
    return str(min(MAX_BUCKET, max(MIN_BUCKET, round_half_up(rating))))


def extract_valid_ratings(
    values: Iterable[Optional[float]], scale: tuple[float, float] = FIVE_STAR_SCALE
) -> list[float]:
    """Drop missing, non-finite, and out-of-scale ratings."""
    low, high = scale
    valid = []
    for value in values:
        if value is None or isinstance(value, bool):
            continue
        value = float(value)
        if math.isfinite(value) and low <= value <= high:
            valid.append(value)
    return valid


def build_distribution(ratings: Iterable[float]) -> dict[str, int]:
    """Count ratings per bucket "1".."5"; every rating lands in exactly one."""
    distribution = empty_distribution()
    for rating in ratings:
        distribution[to_bucket(rating)] += 1
    return distribution


def calculate_average(ratings: Sequence[float]) -> Optional[float]:
    """Mean on the native scale, None when there is nothing to average."""
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


__all__ = [
    "round_half_up",
    "to_bucket",
    "extract_valid_ratings",
    "build_distribution",
    "calculate_average",
]
