from __future__ import annotations

from typing import Optional
import uuid

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from ...type import Overview
from ..interface import IOverviewRepository
from ..option import GetOneOptions, UpsertOptions, UpsertPeriodOptions, DeleteOptions
from ..errors import ErrFailedToGet, ErrFailedToUpsert, ErrFailedToDelete, ErrInvalidData
from .overview_query import (
    build_get_one_query,
    build_upsert_overview_query,
    build_upsert_period_query,
    build_delete_query,
)
from .helpers import transform_to_overview, pick_columns

OVERVIEW_KEY_COLUMNS = ("platform", "business_profile_id", "total_reviews", "last_updated")
PERIOD_KEY_COLUMNS = ("overview_id", "period_key", "period_label", "review_count", "computed_at")


class OverviewPostgresRepository(IOverviewRepository):
    """Upserts of overview and period rows; each call commits on its own."""

    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None):
        self.db = db
        self.logger = logger

    async def get_one(self, opt: GetOneOptions) -> Optional[Overview]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_get_one_query(opt))
                row = result.scalar_one_or_none()

        except SQLAlchemyError as exc:
            self._log_error("get_one", exc)
            raise ErrFailedToGet(exc) from exc

        return transform_to_overview(row) if row else None

    async def upsert(self, opt: UpsertOptions) -> uuid.UUID:
        try:
            values = pick_columns(opt.data.to_dict(), OVERVIEW_KEY_COLUMNS)
        except ValueError as exc:
            raise ErrInvalidData(exc) from exc

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_upsert_overview_query(values))
                overview_id = result.scalar_one()
                await session.commit()
                return overview_id

        except SQLAlchemyError as exc:
            self._log_error("upsert", exc)
            raise ErrFailedToUpsert(exc) from exc

    async def upsert_period(self, opt: UpsertPeriodOptions) -> uuid.UUID:
        try:
            values = pick_columns(opt.data.to_dict(), PERIOD_KEY_COLUMNS)
        except ValueError as exc:
            raise ErrInvalidData(exc) from exc

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_upsert_period_query(values))
                metric_id = result.scalar_one()
                await session.commit()
                return metric_id

        except SQLAlchemyError as exc:
            self._log_error("upsert_period", exc)
            raise ErrFailedToUpsert(exc) from exc

    async def delete(self, opt: DeleteOptions) -> bool:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_delete_query(opt))
                await session.commit()
                return result.rowcount > 0

        except SQLAlchemyError as exc:
            self._log_error("delete", exc)
            raise ErrFailedToDelete(exc) from exc

    def _log_error(self, method: str, exc: Exception) -> None:
        if self.logger:
            self.logger.error(
                f"internal.overview.repository.postgre.overview.{method}: {exc}"
            )


__all__ = ["OverviewPostgresRepository"]
