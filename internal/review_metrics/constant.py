from typing import Dict, Final, FrozenSet, List, Tuple

# Rolling windows: key (days) -> dashboard label; 0 means all time
PERIOD_ALL_TIME: Final[int] = 0
PERIOD_DEFINITIONS: Final[Dict[int, str]] = {
    1: "Last 1 Day",
    3: "Last 3 Days",
    7: "Last 7 Days",
    30: "Last 30 Days",
    180: "Last 6 Months",
    365: "Last 12 Months",
    PERIOD_ALL_TIME: "All Time",
}
PERIOD_KEYS: Final[Tuple[int, ...]] = tuple(PERIOD_DEFINITIONS)

# Histogram buckets, always present even when empty
RATING_BUCKETS: Final[Tuple[str, ...]] = ("1", "2", "3", "4", "5")
MIN_BUCKET: Final[int] = 1
MAX_BUCKET: Final[int] = 5

# Sentiment labels
LABEL_POSITIVE: Final[str] = "positive"
LABEL_NEUTRAL: Final[str] = "neutral"
LABEL_NEGATIVE: Final[str] = "negative"

# Pre-computed score thresholds (score in [-1, 1])
DEFAULT_POSITIVE_THRESHOLD: Final[float] = 0.1
DEFAULT_NEGATIVE_THRESHOLD: Final[float] = -0.1

# Rating fallback on the 1-5 scale
FIVE_STAR_POSITIVE_MIN: Final[int] = 4
FIVE_STAR_NEUTRAL: Final[int] = 3

# Booking.com 1-10 bands: [8, 10] positive, [5, 8) neutral, [1, 5) negative
BOOKING_POSITIVE_MIN: Final[float] = 8.0
BOOKING_NEUTRAL_MIN: Final[float] = 5.0

# Keyword ranking
DEFAULT_KEYWORD_LIMIT: Final[int] = 20
BOOKING_KEYWORD_LIMIT: Final[int] = 10
MIN_TOKEN_LENGTH: Final[int] = 3
STOP_WORDS: Final[FrozenSet[str]] = frozenset(
    {
        "the", "and", "a", "to", "of", "in", "is", "it", "that", "for", "on",
        "with", "as", "at", "this", "by", "from", "an", "be", "or", "but",
        "was", "are", "were", "been", "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can", "these",
        "those", "i", "you", "he", "she", "we", "they", "me", "him", "her",
        "us", "them", "my", "your", "his", "its", "our", "their", "very",
        "not", "all", "there", "here", "just", "also", "than", "then", "too",
    }
)

# Top-N lists (nationalities, room types)
DEFAULT_TOP_LIST_LIMIT: Final[int] = 10
DEFAULT_TAG_LIMIT: Final[int] = 20

# TripAdvisor trip types, matched as case-insensitive substrings in order
TRIP_TYPE_PATTERNS: Final[List[Tuple[str, Tuple[str, ...]]]] = [
    ("family", ("family", "families")),
    ("couples", ("couple",)),
    ("solo", ("solo", "alone")),
    ("business", ("business",)),
    ("friends", ("friend",)),
]

# Booking.com guest types, matched against the upper-cased enum value
GUEST_TYPE_ALIASES: Final[Dict[str, str]] = {
    "SOLO": "solo",
    "SOLO_TRAVELER": "solo",
    "COUPLE": "couples",
    "COUPLES": "couples",
    "FAMILY_WITH_YOUNG_CHILDREN": "families_with_young_children",
    "FAMILY_YOUNG": "families_with_young_children",
    "FAMILY_WITH_OLDER_CHILDREN": "families_with_older_children",
    "FAMILY_OLDER": "families_with_older_children",
    "GROUP_OF_FRIENDS": "groups_of_friends",
    "GROUP": "groups_of_friends",
    "FRIENDS": "groups_of_friends",
    "BUSINESS": "business_travelers",
    "BUSINESS_TRAVELER": "business_travelers",
}
GUEST_TYPES: Final[Tuple[str, ...]] = (
    "solo",
    "couples",
    "families_with_young_children",
    "families_with_older_children",
    "groups_of_friends",
    "business_travelers",
)

# Booking.com stay length bands: short < 3 nights, long > 7 nights
SHORT_STAY_NIGHTS: Final[int] = 3
LONG_STAY_NIGHTS: Final[int] = 7

# Facebook composite score bounds
SCORE_MIN: Final[float] = 0.0
SCORE_MAX: Final[float] = 100.0

__all__ = [
    "PERIOD_ALL_TIME",
    "PERIOD_DEFINITIONS",
    "PERIOD_KEYS",
    "RATING_BUCKETS",
    "MIN_BUCKET",
    "MAX_BUCKET",
    "LABEL_POSITIVE",
    "LABEL_NEUTRAL",
    "LABEL_NEGATIVE",
    "DEFAULT_POSITIVE_THRESHOLD",
    "DEFAULT_NEGATIVE_THRESHOLD",
    "FIVE_STAR_POSITIVE_MIN",
    "FIVE_STAR_NEUTRAL",
    "BOOKING_POSITIVE_MIN",
    "BOOKING_NEUTRAL_MIN",
    "DEFAULT_KEYWORD_LIMIT",
    "BOOKING_KEYWORD_LIMIT",
    "MIN_TOKEN_LENGTH",
    "STOP_WORDS",
    "DEFAULT_TOP_LIST_LIMIT",
    "DEFAULT_TAG_LIMIT",
    "TRIP_TYPE_PATTERNS",
    "GUEST_TYPE_ALIASES",
    "GUEST_TYPES",
    "SHORT_STAY_NIGHTS",
    "LONG_STAY_NIGHTS",
    "SCORE_MIN",
    "SCORE_MAX",
]
