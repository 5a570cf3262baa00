from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from ...type import Review, BusinessProfile
from ..interface import IReviewRepository
from ..option import GetProfileOptions, ListOptions
from ..errors import ErrFailedToGet
from .review_query import build_get_profile_query, build_list_query
from .helpers import transform_to_review, transform_to_business_profile


class ReviewPostgresRepository(IReviewRepository):
    """Read-only access to scraped reviews and their business profiles."""

    def __init__(self, db: PostgresDatabase, logger: Optional[Logger] = None):
        self.db = db
        self.logger = logger

    async def get_business_profile(
        self, opt: GetProfileOptions
    ) -> Optional[BusinessProfile]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_get_profile_query(opt))
                row = result.scalar_one_or_none()

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(
                    f"internal.review.repository.postgre.review.get_business_profile: {exc}"
                )
            raise ErrFailedToGet(exc) from exc

        return transform_to_business_profile(row) if row else None

    async def list(self, opt: ListOptions) -> List[Review]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_query(opt))
                rows = list(result.scalars().all())

        except SQLAlchemyError as exc:
            if self.logger:
                self.logger.error(
                    f"internal.review.repository.postgre.review.list: {exc}"
                )
            raise ErrFailedToGet(exc) from exc

        reviews: List[Review] = []
        for row in rows:
            try:
                reviews.append(transform_to_review(row))
            except ValueError as exc:
                # Unusable row; the rest of the profile is still aggregated
                if self.logger:
                    self.logger.warning(
                        f"internal.review.repository.postgre.review.list: skipping review id={row.id}: {exc}"
                    )
        return reviews


__all__ = ["ReviewPostgresRepository"]
