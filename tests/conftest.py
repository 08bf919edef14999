from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from kepegawaian.config import Settings
from kepegawaian.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'kepegawaian.db'}",
        query_timeout_seconds=5.0,
        check_database_on_startup=False,
    )


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    await app.state.database.create_all()
    yield app
    await app.state.database.dispose()


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(app) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.database.session_maker() as session:
        yield session
