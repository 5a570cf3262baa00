from typing import Final

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "review-analytics"

# PostgreSQL configuration
POSTGRES_SCHEMA: Final[str] = "analytics"
