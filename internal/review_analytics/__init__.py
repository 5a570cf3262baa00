"""Review Analytics Domain.

Per-platform service that turns a business profile's reviews into the
overview and rolling-window rows read by the dashboard.
"""

from .constant import *
from .interface import IReviewAnalytics
from .type import (
    Config,
    Input,
    Output,
    Alert,
    AnalyticsSummary,
)
from .errors import (
    ErrInvalidInput,
    ErrBusinessProfileNotFound,
    ErrFetchFailed,
    ErrPersistenceFailed,
)

from .usecase.new import New as NewReviewAnalytics

__all__ = [
    # Interface
    "IReviewAnalytics",
    # Types
    "Config",
    "Input",
    "Output",
    "Alert",
    "AnalyticsSummary",
    # Errors
    "ErrInvalidInput",
    "ErrBusinessProfileNotFound",
    "ErrFetchFailed",
    "ErrPersistenceFailed",
    # Factory functions
    "NewReviewAnalytics",
    # Constants
    "ALERT_RATING_DROP",
    "ALERT_RECOMMENDATION_DROP",
    "ALERT_MILESTONE",
]
