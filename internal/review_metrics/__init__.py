"""Review metric calculators.

Pure functions over lists of reviews: windowing, rating histogram,
sentiment split, keyword ranking, response metrics and platform-only
metrics. Nothing here performs I/O.
"""

from .constant import *
from .interface import ISentimentScorer
from .type import (
    SentimentCounts,
    KeywordCount,
    ResponseMetrics,
    MetricSnapshot,
)
from .period import (
    get_all_periods,
    get_period_label,
    get_cutoff,
    filter_by_period,
)
from .histogram import build_distribution, calculate_average, extract_valid_ratings
from .sentiment import analyze_sentiment, calculate_sentiment_score
from .keyword import extract_keywords
from .response import calculate_response_metrics

__all__ = [
    # Interface
    "ISentimentScorer",
    # Types
    "SentimentCounts",
    "KeywordCount",
    "ResponseMetrics",
    "MetricSnapshot",
    # Calculators
    "get_all_periods",
    "get_period_label",
    "get_cutoff",
    "filter_by_period",
    "build_distribution",
    "calculate_average",
    "extract_valid_ratings",
    "analyze_sentiment",
    "calculate_sentiment_score",
    "extract_keywords",
    "calculate_response_metrics",
    # Constants
    "PERIOD_DEFINITIONS",
    "PERIOD_KEYS",
    "PERIOD_ALL_TIME",
    "STOP_WORDS",
]
