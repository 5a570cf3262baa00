"""Batch entry point: recompute one business profile's analytics.

Usage:
    python -m apps.analytics.main --platform google --business-profile-id <id>
"""

import argparse
import asyncio
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from config.config import load_config, Config
from internal.model.constant import LOGGER_SERVICE_NAME
from internal.overview.repository import New as NewOverviewRepository
from internal.review.constant import Platform
from internal.review.repository import New as NewReviewRepository
from internal.review_analytics import (
    Config as AnalyticsConfig,
    Input,
    NewReviewAnalytics,
    ErrBusinessProfileNotFound,
    ErrFetchFailed,
    ErrPersistenceFailed,
)
from internal.review_analytics.usecase.usecase import ReviewAnalytics

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


@dataclass
class Dependencies:
    logger: Logger
    db: PostgresDatabase
    config: Config


def init_logger(config: Config) -> Logger:
    return Logger(
        LoggerConfig(
            level=config.logging.level,
            colorize=config.logging.colorize,
            service_name=LOGGER_SERVICE_NAME,
        )
    )


async def init_dependencies(config: Config, logger: Logger) -> Dependencies:
    """Initialize the database and verify it answers.

    Raises:
        RuntimeError: If PostgreSQL is unreachable
    """
    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            schema=config.database.schema,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
            echo=config.database.echo,
        ),
        logger=logger,
    )
    if not await db.health_check():
        await db.close()
        raise RuntimeError("PostgreSQL health check failed")
    logger.info("PostgreSQL connection verified")

    return Dependencies(logger=logger, db=db, config=config)


def build_analytics_config(config: Config, platform: Platform) -> AnalyticsConfig:
    analytics = config.analytics
    keyword_limit = (
        analytics.keyword.booking_limit
        if platform == Platform.BOOKING
        else analytics.keyword.default_limit
    )
    rating_drop = (
        analytics.alert.booking_rating_drop
        if platform == Platform.BOOKING
        else analytics.alert.rating_drop
    )
    return AnalyticsConfig(
        platform=platform,
        keyword_limit=keyword_limit,
        top_list_limit=analytics.top_list_limit,
        tag_limit=analytics.tag_limit,
        positive_threshold=analytics.sentiment.positive_threshold,
        negative_threshold=analytics.sentiment.negative_threshold,
        extra_stop_words=list(analytics.keyword.extra_stop_words),
        rating_drop_threshold=rating_drop,
        recommendation_drop_threshold=analytics.alert.recommendation_drop,
        milestones=list(analytics.alert.milestones),
    )


def build_service(deps: Dependencies, platform: Platform) -> ReviewAnalytics:
    return NewReviewAnalytics(
        config=build_analytics_config(deps.config, platform),
        review_repository=NewReviewRepository(deps.db, deps.logger),
        overview_repository=NewOverviewRepository(deps.db, deps.logger),
        logger=deps.logger,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recompute review analytics for one business profile"
    )
    parser.add_argument(
        "--platform",
        required=True,
        choices=[p.value for p in Platform],
    )
    parser.add_argument("--business-profile-id", required=True)
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--show", action="store_true", help="print the stored summary instead"
    )
    action.add_argument(
        "--delete", action="store_true", help="delete the stored analytics"
    )
    return parser.parse_args(argv)


async def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    platform = Platform(args.platform)
    profile_id = args.business_profile_id

    config = load_config()
    logger = init_logger(config)

    if not profile_id.strip():
        logger.error("--business-profile-id must not be blank")
        return EXIT_FATAL

    try:
        deps = await init_dependencies(config, logger)
    except RuntimeError as exc:
        logger.error(f"Startup failed: {exc}")
        return EXIT_FATAL

    try:
        service = build_service(deps, platform)
        with logger.job_context(f"{platform.value}:{profile_id}"):
            if args.show:
                summary = await service.get_analytics(profile_id)
                logger.info(f"Summary: {summary}")
                return EXIT_OK

            if args.delete:
                await service.delete_analytics(profile_id)
                return EXIT_OK

            output = await service.process(Input(business_profile_id=profile_id))
            return EXIT_PARTIAL if output.failed_periods else EXIT_OK

    except ErrBusinessProfileNotFound as exc:
        logger.error(f"Business profile not found: {exc}")
        return EXIT_FATAL
    except (ErrFetchFailed, ErrPersistenceFailed) as exc:
        logger.exception(f"Analytics run failed: {exc}")
        return EXIT_FATAL
    finally:
        await deps.db.close()


def cli() -> None:
    """Entry point for console script."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
