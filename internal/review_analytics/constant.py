# Alert types raised after a run
ALERT_RATING_DROP = "rating_drop"
ALERT_RECOMMENDATION_DROP = "recommendation_drop"
ALERT_MILESTONE = "milestone"

# Defaults (overridable through config)
DEFAULT_RATING_DROP = 0.5
DEFAULT_BOOKING_RATING_DROP = 1.0
DEFAULT_RECOMMENDATION_DROP = 10.0
DEFAULT_MILESTONES = (50, 100, 250, 500, 1000)

# Log prefix
LOG_PREFIX = "[ReviewAnalytics]"

__all__ = [
    "ALERT_RATING_DROP",
    "ALERT_RECOMMENDATION_DROP",
    "ALERT_MILESTONE",
    "DEFAULT_RATING_DROP",
    "DEFAULT_BOOKING_RATING_DROP",
    "DEFAULT_RECOMMENDATION_DROP",
    "DEFAULT_MILESTONES",
    "LOG_PREFIX",
]
