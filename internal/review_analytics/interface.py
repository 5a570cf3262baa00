from typing import Optional, Protocol, runtime_checkable

from .type import Input, Output, AnalyticsSummary


@runtime_checkable
class IReviewAnalytics(Protocol):
    """Protocol for a platform's analytics service."""

    async def process(self, input_data: Input) -> Output:
        """Recompute and store the overview and period rows of a profile."""
        ...

    async def get_analytics(self, business_profile_id: str) -> Optional[AnalyticsSummary]:
        """Summary of the stored overview, or None before the first run."""
        ...

    async def delete_analytics(self, business_profile_id: str) -> bool:
        """Remove the overview and its period rows."""
        ...


__all__ = ["IReviewAnalytics"]
