"""
Test fixtures

- each test gets its own app on a private in-memory SQLite (aiosqlite)
- ASGITransport does not run the lifespan, so tables are created here
- the `client` talks to the app in-process through httpx
"""
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from cms_backend.app import create_app
from cms_backend.utils.database import init_models

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def app():
    application = create_app(TEST_DATABASE_URL)
    await init_models(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def db_session(app) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
