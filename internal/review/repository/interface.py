from typing import List, Optional, Protocol, runtime_checkable

from ..type import Review, BusinessProfile
from .option import GetProfileOptions, ListOptions


@runtime_checkable
class IReviewRepository(Protocol):
    async def get_business_profile(
        self, opt: GetProfileOptions
    ) -> Optional[BusinessProfile]: ...
    async def list(self, opt: ListOptions) -> List[Review]: ...


__all__ = ["IReviewRepository"]
