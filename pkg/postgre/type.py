from dataclasses import dataclass

from .constant import *


@dataclass
class PostgresConfig:
    """Configuration for the analytics PostgreSQL connection.

    Attributes:
        database_url: Connection URL; plain ``postgresql://`` URLs are
            rewritten to the asyncpg driver
        schema: Schema put first on the search_path of every session
        pool_size: Connection pool size
        max_overflow: Extra connections allowed above pool_size
        pool_recycle: Recycle connections after N seconds
        pool_pre_ping: Verify connections before use
        echo: Log SQL statements
    """

    database_url: str
    schema: str = DEFAULT_SCHEMA
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_recycle: int = DEFAULT_POOL_RECYCLE
    pool_pre_ping: bool = DEFAULT_POOL_PRE_PING
    echo: bool = DEFAULT_ECHO

    def __post_init__(self):
        if not self.database_url:
            raise ValueError(ERROR_DATABASE_URL_EMPTY)
        if not self.database_url.startswith((ASYNC_DRIVER_SCHEME,) + SYNC_SCHEMES):
            raise ValueError(ERROR_INVALID_DATABASE_URL)
        if self.pool_size <= 0:
            raise ValueError(ERROR_POOL_SIZE_POSITIVE)
        if self.max_overflow < 0:
            raise ValueError(ERROR_MAX_OVERFLOW_NON_NEGATIVE)
        if self.pool_recycle <= 0:
            raise ValueError(ERROR_POOL_RECYCLE_POSITIVE)
        if not self.schema or not self.schema.strip():
            raise ValueError(ERROR_SCHEMA_EMPTY)

    @property
    def async_url(self) -> str:
        for scheme in SYNC_SCHEMES:
            if self.database_url.startswith(scheme):
                return ASYNC_DRIVER_SCHEME + self.database_url[len(scheme):]
        return self.database_url


__all__ = [
    "PostgresConfig",
]
