"""FastAPI dependencies wiring requests to the injected database."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings
from .database import Database


def get_database(request: Request) -> Database:
    """Return the Database constructed by the application factory."""
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session scoped to the current request."""
    async for session in get_database(request).session():
        yield session
