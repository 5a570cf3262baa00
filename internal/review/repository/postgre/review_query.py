from sqlalchemy import select

from internal.model.business_profile import BusinessProfile
from internal.model.review import Review
from ..option import GetProfileOptions, ListOptions


def build_get_profile_query(opt: GetProfileOptions):
    return (
        select(BusinessProfile)
        .where(BusinessProfile.id == opt.id)
        .where(BusinessProfile.platform == opt.platform.value)
        .limit(1)
    )


def build_list_query(opt: ListOptions):
    return (
        select(Review)
        .where(
            Review.business_profile_id == opt.business_profile_id,
            Review.platform == opt.platform.value,
        )
        .order_by(Review.published_at.desc(), Review.id)
    )


__all__ = [
    "build_get_profile_query",
    "build_list_query",
]
