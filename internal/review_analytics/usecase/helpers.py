from typing import Any, Callable, Optional, Sequence

from internal.overview.type import Overview
from internal.review.constant import Platform, RATING_SCALES
from internal.review.type import Review
from internal.review_metrics.constant import STOP_WORDS
from internal.review_metrics.histogram import (
    build_distribution,
    calculate_average,
    extract_valid_ratings,
)
from internal.review_metrics.interface import ISentimentScorer
from internal.review_metrics.keyword import extract_keywords
from internal.review_metrics.platform import booking, facebook, google, tripadvisor
from internal.review_metrics.response import calculate_response_metrics
from internal.review_metrics.sentiment import analyze_sentiment
from internal.review_metrics.type import MetricSnapshot, ResponseMetrics
from ..type import Config, Alert
from ..constant import ALERT_RATING_DROP, ALERT_RECOMMENDATION_DROP, ALERT_MILESTONE

PlatformMetricBuilder = Callable[[Sequence[Review], ResponseMetrics, Config], dict]

PLATFORM_METRIC_BUILDERS: dict[Platform, PlatformMetricBuilder] = {
    Platform.GOOGLE: lambda reviews, response, config: google.build_metrics(reviews),
    Platform.TRIPADVISOR: lambda reviews, response, config: tripadvisor.build_metrics(
        reviews
    ),
    Platform.FACEBOOK: lambda reviews, response, config: facebook.build_metrics(
        reviews, response.response_rate, config.tag_limit
    ),
    Platform.BOOKING: lambda reviews, response, config: booking.build_metrics(
        reviews, config.top_list_limit
    ),
}


def stop_words_for(config: Config) -> frozenset:
    extra = {w.strip().lower() for w in config.extra_stop_words if w.strip()}
    return STOP_WORDS | extra


def valid_ratings(platform: Platform, reviews: Sequence[Review]) -> list[float]:
    scale = RATING_SCALES.get(platform)
    if scale is None:
        return []
    return extract_valid_ratings((r.rating for r in reviews), scale)


def build_snapshot(
    config: Config,
    reviews: Sequence[Review],
    scorer: Optional[ISentimentScorer] = None,
) -> MetricSnapshot:
    """Compute every aggregate for ``reviews``; an empty list gives defaults."""
    platform = config.platform
    response = calculate_response_metrics(reviews)
    platform_metrics = PLATFORM_METRIC_BUILDERS[platform](reviews, response, config)

    ratings = valid_ratings(platform, reviews)
    if platform == Platform.FACEBOOK:
        average_rating = platform_metrics["star_equivalent"]
    else:
        average_rating = calculate_average(ratings)

    return MetricSnapshot(
        review_count=len(reviews),
        average_rating=average_rating,
        rating_distribution=build_distribution(ratings),
        sentiment=analyze_sentiment(
            platform,
            reviews,
            scorer,
            config.positive_threshold,
            config.negative_threshold,
        ),
        top_keywords=extract_keywords(
            reviews, config.keyword_limit, stop_words_for(config)
        ),
        response=response,
        platform_metrics=platform_metrics,
    )


def recommendation_rate(platform_metrics: dict[str, Any]) -> Optional[float]:
    recommendation = platform_metrics.get("recommendation") or {}
    return recommendation.get("recommendation_rate")


def detect_alerts(
    config: Config,
    previous: Optional[Overview],
    snapshot: MetricSnapshot,
) -> list[Alert]:
    """Compare a fresh snapshot with the stored overview.

    No alerts on a first run: there is nothing to compare against.
    """
    if previous is None:
        return []

    alerts: list[Alert] = []

    if config.platform == Platform.FACEBOOK:
        before = recommendation_rate(previous.platform_metrics)
        after = recommendation_rate(snapshot.platform_metrics)
        if (
            before is not None
            and after is not None
            and before - after >= config.recommendation_drop_threshold
        ):
            alerts.append(
                Alert(
                    type=ALERT_RECOMMENDATION_DROP,
                    message=f"Recommendation rate dropped by {before - after:.1f} points",
                    previous=before,
                    current=after,
                )
            )
    elif previous.average_rating is not None and snapshot.average_rating is not None:
        drop = previous.average_rating - snapshot.average_rating
        if drop >= config.rating_drop_threshold:
            alerts.append(
                Alert(
                    type=ALERT_RATING_DROP,
                    message=f"Rating dropped by {drop:.1f}",
                    previous=previous.average_rating,
                    current=snapshot.average_rating,
                )
            )

    before_total, after_total = previous.total_reviews, snapshot.review_count
    for milestone in sorted(config.milestones):
        if before_total < milestone <= after_total:
            alerts.append(
                Alert(
                    type=ALERT_MILESTONE,
                    message=f"Reached {milestone} reviews",
                    previous=float(before_total),
                    current=float(after_total),
                )
            )

    return alerts


__all__ = [
    "PLATFORM_METRIC_BUILDERS",
    "stop_words_for",
    "valid_ratings",
    "build_snapshot",
    "recommendation_rate",
    "detect_alerts",
]
