class RepositoryError(Exception):
    pass


class ErrFailedToGet(RepositoryError):
    pass


class ErrInvalidData(RepositoryError):
    pass


__all__ = [
    "RepositoryError",
    "ErrFailedToGet",
    "ErrInvalidData",
]
