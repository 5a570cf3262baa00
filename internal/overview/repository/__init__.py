from .interface import IOverviewRepository
from .new import New
from .option import (
    GetOneOptions,
    UpsertOptions,
    UpsertPeriodOptions,
    DeleteOptions,
)
from .errors import (
    RepositoryError,
    ErrFailedToGet,
    ErrFailedToUpsert,
    ErrFailedToDelete,
    ErrInvalidData,
)

__all__ = [
    "IOverviewRepository",
    "New",
    "GetOneOptions",
    "UpsertOptions",
    "UpsertPeriodOptions",
    "DeleteOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrFailedToUpsert",
    "ErrFailedToDelete",
    "ErrInvalidData",
]
