"""Interface for PostgreSQL database operations."""

from typing import AsyncContextManager, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession


@runtime_checkable
class IDatabase(Protocol):
    """Protocol for the session provider used by repositories."""

    def get_session(self) -> AsyncContextManager[AsyncSession]:
        """Open a session scoped to one unit of work."""
        ...

    async def health_check(self) -> bool:
        """Return True when the database answers ``SELECT 1``."""
        ...

    async def close(self) -> None:
        """Dispose the engine and its pool."""
        ...


__all__ = ["IDatabase"]
