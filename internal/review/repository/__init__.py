from .interface import IReviewRepository
from .new import New
from .option import GetProfileOptions, ListOptions
from .errors import RepositoryError, ErrFailedToGet, ErrInvalidData

__all__ = [
    "IReviewRepository",
    "New",
    "GetProfileOptions",
    "ListOptions",
    "RepositoryError",
    "ErrFailedToGet",
    "ErrInvalidData",
]
