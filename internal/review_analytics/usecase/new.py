"""Factory function for creating a review analytics service."""

from typing import Optional

from pkg.logger.logger import Logger
from internal.overview.repository import IOverviewRepository
from internal.review.repository import IReviewRepository
from internal.review_metrics.interface import ISentimentScorer

from ..type import Config
from .usecase import ReviewAnalytics


def New(
    config: Config,
    review_repository: IReviewRepository,
    overview_repository: IOverviewRepository,
    logger: Optional[Logger] = None,
    sentiment_scorer: Optional[ISentimentScorer] = None,
) -> ReviewAnalytics:
    """Create a review analytics service for ``config.platform``.

    Args:
        config: Platform and aggregation settings
        review_repository: Read access to reviews and business profiles
        overview_repository: Write access to the aggregate rows
        logger: Logger instance (optional)
        sentiment_scorer: Text scorer for reviews lacking a sentiment score (optional)

    Returns:
        ReviewAnalytics instance

    Raises:
        ValueError: If config or a repository is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    if review_repository is None:
        raise ValueError("review_repository is required")
    if overview_repository is None:
        raise ValueError("overview_repository is required")

    return ReviewAnalytics(
        config=config,
        review_repository=review_repository,
        overview_repository=overview_repository,
        logger=logger,
        sentiment_scorer=sentiment_scorer,
    )


__all__ = ["New"]
