from typing import Any, Dict

from sqlalchemy import select, delete as sql_delete
from sqlalchemy.dialects.postgresql import insert

from internal.model.overview import ReviewOverview, ReviewPeriodicalMetric
from ..option import GetOneOptions, DeleteOptions

OVERVIEW_CONFLICT_COLUMNS = ["platform", "business_profile_id"]
PERIOD_CONFLICT_COLUMNS = ["overview_id", "period_key"]


def build_get_one_query(opt: GetOneOptions):
    return (
        select(ReviewOverview)
        .where(ReviewOverview.platform == opt.platform.value)
        .where(ReviewOverview.business_profile_id == opt.business_profile_id)
        .limit(1)
    )


def build_upsert_overview_query(values: Dict[str, Any]):
    stmt = insert(ReviewOverview).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=OVERVIEW_CONFLICT_COLUMNS,
        set_={
            key: stmt.excluded[key]
            for key in values
            if key not in OVERVIEW_CONFLICT_COLUMNS
        },
    )
    return stmt.returning(ReviewOverview.id)


def build_upsert_period_query(values: Dict[str, Any]):
    stmt = insert(ReviewPeriodicalMetric).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=PERIOD_CONFLICT_COLUMNS,
        set_={
            key: stmt.excluded[key]
            for key in values
            if key not in PERIOD_CONFLICT_COLUMNS
        },
    )
    return stmt.returning(ReviewPeriodicalMetric.id)


def build_delete_query(opt: DeleteOptions):
    return (
        sql_delete(ReviewOverview)
        .where(ReviewOverview.platform == opt.platform.value)
        .where(ReviewOverview.business_profile_id == opt.business_profile_id)
    )


__all__ = [
    "build_get_one_query",
    "build_upsert_overview_query",
    "build_upsert_period_query",
    "build_delete_query",
]
