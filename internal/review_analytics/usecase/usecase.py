"""Review analytics service - per-platform aggregation of a business profile."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pkg.logger.logger import Logger
from internal.overview.type import OverviewData, PeriodicalMetricData
from internal.overview.repository import (
    IOverviewRepository,
    GetOneOptions,
    UpsertOptions,
    UpsertPeriodOptions,
    DeleteOptions,
    RepositoryError as OverviewRepositoryError,
)
from internal.review.repository import (
    IReviewRepository,
    GetProfileOptions,
    ListOptions,
    RepositoryError as ReviewRepositoryError,
)
from internal.review.constant import Platform
from internal.review.type import Review
from internal.review_metrics.constant import PERIOD_ALL_TIME
from internal.review_metrics.interface import ISentimentScorer
from internal.review_metrics.period import (
    as_aware,
    filter_by_period,
    get_all_periods,
    get_period_label,
)
from internal.review_metrics.type import MetricSnapshot
from ..interface import IReviewAnalytics
from ..type import Config, Input, Output, AnalyticsSummary
from ..errors import (
    ErrInvalidInput,
    ErrBusinessProfileNotFound,
    ErrFetchFailed,
    ErrPersistenceFailed,
)
from ..constant import LOG_PREFIX
from .helpers import build_snapshot, detect_alerts, valid_ratings


class ReviewAnalytics(IReviewAnalytics):
    """Recomputes the dashboard rows of one platform for a business profile.

    A run reads every review of the profile, upserts the overview row, then
    upserts one row per rolling window. Windows are written independently:
    a failed window is logged and reported in the output while the others
    still land. Missing profile, unreadable store and a failed overview
    write abort the run.
    """

    def __init__(
        self,
        config: Config,
        review_repository: IReviewRepository,
        overview_repository: IOverviewRepository,
        logger: Optional[Logger] = None,
        *,
        sentiment_scorer: Optional[ISentimentScorer] = None,
    ):
        """Initialize the service with its dependencies.

        Args:
            config: Platform and aggregation settings
            review_repository: Read access to reviews and business profiles
            overview_repository: Write access to the aggregate rows
            logger: Logger instance (optional)
            sentiment_scorer: Scores review text lacking an upstream score (optional)
        """
        self.config = config
        self.platform = config.platform
        self.review_repository = review_repository
        self.overview_repository = overview_repository
        self.logger = logger
        self.sentiment_scorer = sentiment_scorer

    async def process(self, input_data: Input) -> Output:
        """Recompute the overview and every period row of a profile.

        Args:
            input_data: Profile id and the clock reading to compute windows from

        Returns:
            Output describing what was written

        Raises:
            ErrInvalidInput: input_data is not an Input
            ErrBusinessProfileNotFound: The profile is unknown on this platform
            ErrFetchFailed: Reviews or the stored overview could not be read
            ErrPersistenceFailed: The overview row could not be written
        """
        if not isinstance(input_data, Input):
            raise ErrInvalidInput("input_data must be an instance of Input")

        profile_id = input_data.business_profile_id
        now = as_aware(input_data.now or datetime.now(timezone.utc))

        self._info(f"Processing {self.platform.value} profile_id={profile_id}")

        reviews, previous = await self._load(profile_id)
        output = Output(
            business_profile_id=profile_id,
            platform=self.platform,
            total_reviews=len(reviews),
        )

        if not reviews and previous is not None:
            self._info(
                f"No reviews for profile_id={profile_id}, keeping existing overview"
            )
            output.overview_id = previous.id
            output.skipped = True
            return output

        snapshot = build_snapshot(self.config, reviews, self.sentiment_scorer)
        self._log_data_quality(profile_id, reviews, snapshot)

        try:
            output.overview_id = await self.overview_repository.upsert(
                UpsertOptions(
                    data=OverviewData(
                        platform=self.platform,
                        business_profile_id=profile_id,
                        total_reviews=len(reviews),
                        metrics=snapshot.to_dict(),
                        last_updated=now,
                    )
                )
            )
        except OverviewRepositoryError as exc:
            self._error(f"Failed to upsert overview profile_id={profile_id}: {exc}")
            raise ErrPersistenceFailed(
                f"overview upsert failed for {profile_id}: {exc}"
            ) from exc

        for period_key in get_all_periods():
            try:
                await self._write_period(output, reviews, snapshot, period_key, now)
                output.periods_written.append(period_key)
            except Exception as exc:
                output.failed_periods[period_key] = str(exc)
                self._error(
                    f"Failed period={period_key} profile_id={profile_id}: {exc}"
                )

        output.alerts = detect_alerts(self.config, previous, snapshot)
        for alert in output.alerts:
            self._warning(f"Alert profile_id={profile_id}: {alert.message}")

        self._info(
            f"Completed profile_id={profile_id}, reviews={len(reviews)}, "
            f"periods={len(output.periods_written)}, failed={len(output.failed_periods)}"
        )
        return output

    async def get_analytics(self, business_profile_id: str) -> Optional[AnalyticsSummary]:
        try:
            overview = await self.overview_repository.get_one(
                GetOneOptions(
                    platform=self.platform, business_profile_id=business_profile_id
                )
            )
        except OverviewRepositoryError as exc:
            raise ErrFetchFailed(str(exc)) from exc

        if overview is None:
            return None

        return AnalyticsSummary(
            business_profile_id=business_profile_id,
            platform=self.platform,
            total_reviews=overview.total_reviews,
            average_rating=overview.average_rating,
            sentiment_score=overview.sentiment_score,
            last_updated=overview.last_updated,
        )

    async def delete_analytics(self, business_profile_id: str) -> bool:
        try:
            deleted = await self.overview_repository.delete(
                DeleteOptions(
                    platform=self.platform, business_profile_id=business_profile_id
                )
            )
        except OverviewRepositoryError as exc:
            raise ErrPersistenceFailed(str(exc)) from exc

        self._info(f"Deleted analytics profile_id={business_profile_id}: {deleted}")
        return deleted

    async def _load(self, profile_id: str):
        try:
            profile = await self.review_repository.get_business_profile(
                GetProfileOptions(id=profile_id, platform=self.platform)
            )
        except ReviewRepositoryError as exc:
            raise ErrFetchFailed(f"profile lookup failed for {profile_id}: {exc}") from exc

        if profile is None:
            raise ErrBusinessProfileNotFound(
                f"{self.platform.value} business profile not found: {profile_id}"
            )

        try:
            reviews = await self.review_repository.list(
                ListOptions(business_profile_id=profile_id, platform=self.platform)
            )
            previous = await self.overview_repository.get_one(
                GetOneOptions(platform=self.platform, business_profile_id=profile_id)
            )
        except (ReviewRepositoryError, OverviewRepositoryError) as exc:
            raise ErrFetchFailed(f"read failed for {profile_id}: {exc}") from exc

        return reviews, previous

    async def _write_period(
        self,
        output: Output,
        reviews: list[Review],
        all_time: MetricSnapshot,
        period_key: int,
        now: datetime,
    ) -> None:
        if period_key == PERIOD_ALL_TIME:
            snapshot = all_time
        else:
            snapshot = build_snapshot(
                self.config,
                filter_by_period(reviews, period_key, now),
                self.sentiment_scorer,
            )

        await self.overview_repository.upsert_period(
            UpsertPeriodOptions(
                data=PeriodicalMetricData(
                    overview_id=output.overview_id,
                    period_key=period_key,
                    period_label=get_period_label(period_key),
                    review_count=snapshot.review_count,
                    metrics=snapshot.to_dict(),
                    computed_at=now,
                )
            )
        )

    def _log_data_quality(
        self, profile_id: str, reviews: list[Review], snapshot: MetricSnapshot
    ) -> None:
        if not self.logger:
            return

        rated = valid_ratings(self.platform, reviews)
        if self.platform != Platform.FACEBOOK and len(rated) < len(reviews):
            self.logger.debug(
                f"{LOG_PREFIX} profile_id={profile_id}: "
                f"{len(reviews) - len(rated)} reviews without a valid rating"
            )

        excluded = snapshot.response.excluded_response_times
        if excluded:
            self.logger.warning(
                f"{LOG_PREFIX} profile_id={profile_id}: "
                f"{excluded} replies dated before their review, left out of response time"
            )

    def _info(self, message: str) -> None:
        if self.logger:
            self.logger.info(f"{LOG_PREFIX} {message}")

    def _warning(self, message: str) -> None:
        if self.logger:
            self.logger.warning(f"{LOG_PREFIX} {message}")

    def _error(self, message: str) -> None:
        if self.logger:
            self.logger.error(f"{LOG_PREFIX} {message}")


__all__ = ["ReviewAnalytics"]
