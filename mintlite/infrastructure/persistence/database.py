"""Async PostgreSQL engine and unit-of-work sessions.

One ``Database`` lives for the whole process (``get_database``); each
request gets a session from ``get_session`` whose transaction commits when
the request's handler returns and rolls back when it raises.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Engine plus session factory for ``postgresql+asyncpg`` URLs.

    Usage:
        db = Database(settings.database_url, echo=settings.db_echo)
        async with db.get_session() as session:
            repo = HoldingRepository(session)
            ...
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            pool_size=pool_size,
            max_overflow=max_overflow,
            # asyncpg connection options
            connect_args={
                "server_settings": {"jit": "off"},
                "command_timeout": 60,
                "timeout": 30,
            },
        )
        # Models stay loaded after commit
        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; commit on normal exit, roll back on any exception."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create missing tables (``DB_CREATE_TABLES=true``, local use only)."""
        from mintlite.infrastructure.persistence.base import BaseModel
        from mintlite.infrastructure.persistence.models import Holding  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the connection pool at shutdown."""
        await self.engine.dispose()
