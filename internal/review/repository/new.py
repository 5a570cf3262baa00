from typing import Optional

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.review import ReviewPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Optional[Logger] = None,
) -> ReviewPostgresRepository:
    return ReviewPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
