from typing import Optional, Protocol, runtime_checkable
import uuid

from ..type import Overview
from .option import GetOneOptions, UpsertOptions, UpsertPeriodOptions, DeleteOptions


@runtime_checkable
class IOverviewRepository(Protocol):
    async def get_one(self, opt: GetOneOptions) -> Optional[Overview]: ...
    async def upsert(self, opt: UpsertOptions) -> uuid.UUID: ...
    async def upsert_period(self, opt: UpsertPeriodOptions) -> uuid.UUID: ...
    async def delete(self, opt: DeleteOptions) -> bool: ...


__all__ = ["IOverviewRepository"]
