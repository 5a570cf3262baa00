from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from pkg.logger.logger import Logger
from .interface import IDatabase
from .type import PostgresConfig
from .constant import *


class PostgresDatabase(IDatabase):
    """Async PostgreSQL engine and session factory (SQLAlchemy + asyncpg).

    Each ``get_session`` call is one unit of work: the caller commits, and
    any exception rolls the session back before it is released.
    """

    def __init__(self, config: PostgresConfig, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger
        self.engine = None
        self.session_factory = None
        self._initialize_engine()

    def _initialize_engine(self) -> None:
        engine_kwargs = {
            "echo": self.config.echo,
            "pool_pre_ping": self.config.pool_pre_ping,
            "pool_recycle": self.config.pool_recycle,
        }

        # NullPool in echo mode so each statement shows its own connection
        if self.config.echo:
            engine_kwargs["poolclass"] = NullPool
        else:
            engine_kwargs["pool_size"] = self.config.pool_size
            engine_kwargs["max_overflow"] = self.config.max_overflow

        self.engine = create_async_engine(self.config.async_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )

        if self.logger:
            self.logger.info(
                f"pkg.postgre.postgres: engine initialized (schema={self.config.schema})"
            )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session with the configured schema on its search_path.

        Raises:
            RuntimeError: If the engine was not initialized
        """
        if not self.session_factory:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                if self.config.schema != DEFAULT_SCHEMA:
                    await session.execute(
                        text(
                            f"SET search_path TO {self.config.schema}, {DEFAULT_SCHEMA}"
                        )
                    )
                yield session
            except Exception as exc:
                if self.logger:
                    self.logger.error(f"pkg.postgre.postgres.get_session: {exc}")
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as exc:
            if self.logger:
                self.logger.error(f"pkg.postgre.postgres.health_check: {exc}")
            return False

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            if self.logger:
                self.logger.info("pkg.postgre.postgres: engine closed")


__all__ = [
    "PostgresDatabase",
]
