"""Module-specific errors for the review analytics domain."""


class ErrInvalidInput(Exception):
    """Raised when the run input is invalid."""

    pass


class ErrBusinessProfileNotFound(Exception):
    """Raised when the business profile does not exist on the platform."""

    pass


class ErrFetchFailed(Exception):
    """Raised when reviews or the stored overview cannot be read."""

    pass


class ErrPersistenceFailed(Exception):
    """Raised when the overview row cannot be written."""

    pass


__all__ = [
    "ErrInvalidInput",
    "ErrBusinessProfileNotFound",
    "ErrFetchFailed",
    "ErrPersistenceFailed",
]
