from dataclasses import dataclass

from internal.review.constant import Platform
from ..type import OverviewData, PeriodicalMetricData


@dataclass
class GetOneOptions:
    platform: Platform
    business_profile_id: str


@dataclass
class UpsertOptions:
    data: OverviewData


@dataclass
class UpsertPeriodOptions:
    data: PeriodicalMetricData


@dataclass
class DeleteOptions:
    platform: Platform
    business_profile_id: str


__all__ = [
    "GetOneOptions",
    "UpsertOptions",
    "UpsertPeriodOptions",
    "DeleteOptions",
]
