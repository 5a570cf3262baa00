from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.overview import OverviewPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Optional[Logger] = None,
) -> OverviewPostgresRepository:
    return OverviewPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
