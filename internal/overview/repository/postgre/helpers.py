from typing import Any, Dict

from internal.model.overview import ReviewOverview
from internal.review.constant import Platform
from ...type import Overview

# Columns the aggregate tables share with MetricSnapshot.to_dict()
METRIC_COLUMNS = (
    "average_rating",
    "rating_distribution",
    "positive_count",
    "neutral_count",
    "negative_count",
    "sentiment_total",
    "sentiment_score",
    "top_keywords",
    "responded_count",
    "response_rate",
    "avg_response_time_hours",
    "median_response_time_hours",
    "platform_metrics",
)


def transform_to_overview(row: ReviewOverview) -> Overview:
    return Overview(
        id=row.id,
        platform=Platform(row.platform),
        business_profile_id=row.business_profile_id,
        total_reviews=row.total_reviews or 0,
        average_rating=row.average_rating,
        sentiment_score=row.sentiment_score or 0.0,
        response_rate=row.response_rate or 0.0,
        platform_metrics=row.platform_metrics or {},
        last_updated=row.last_updated,
    )


def pick_columns(values: Dict[str, Any], fixed: tuple) -> Dict[str, Any]:
    """Keep the key columns plus the known metric columns.

    Raises ValueError when a metric column is missing so a partial row is
    never written.
    """
    missing = [c for c in METRIC_COLUMNS if c not in values]
    if missing:
        raise ValueError(f"missing metric columns: {missing}")
    return {k: values[k] for k in fixed + METRIC_COLUMNS}


__all__ = [
    "METRIC_COLUMNS",
    "transform_to_overview",
    "pick_columns",
]
