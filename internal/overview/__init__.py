"""Overview domain.

Storage of the all-time overview row and its per-period rows.
"""

from .type import Overview, OverviewData, PeriodicalMetricData

__all__ = [
    "Overview",
    "OverviewData",
    "PeriodicalMetricData",
]
