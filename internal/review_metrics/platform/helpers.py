import math
from collections import Counter
from typing import Any, Iterable, Optional, Sequence


def average_present(values: Iterable[Optional[float]]) -> Optional[float]:
    """Mean of the values that are present, None when none are."""
    present = [
        float(v)
        for v in values
        if v is not None and not isinstance(v, bool) and math.isfinite(v)
    ]
    if not present:
        return None
    return sum(present) / len(present)


def average_sub_ratings(
    sub_ratings: Sequence[Any], fields: Sequence[str]
) -> dict[str, Optional[float]]:
    return {
        name: average_present(getattr(sr, name) for sr in sub_ratings)
        for name in fields
    }


def top_values(values: Iterable[Optional[str]], limit: int) -> list[dict[str, Any]]:
    """Most frequent non-empty values as ``{"value", "count"}`` items."""
    counter = Counter(v.strip() for v in values if v and v.strip())
    return [{"value": v, "count": c} for v, c in counter.most_common(limit)]


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


__all__ = [
    "average_present",
    "average_sub_ratings",
    "top_values",
    "clamp",
]
