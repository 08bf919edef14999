"""Database connection and session handling.

The engine and session factory live on a ``Database`` object built by the
application factory and handed to request handlers through ``app.state``.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base


class Database:
    """Async engine plus session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo)
        self.session_maker = async_sessionmaker(self.engine, expire_on_commit=False)

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that is closed when the request finishes."""
        async with self.session_maker() as session:
            yield session

    async def ping(self) -> None:
        """Run a trivial query, raising if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create missing tables for every registered model."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
