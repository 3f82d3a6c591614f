"""Pytest fixtures backed by a fresh in-memory SQLite catalog per test."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

SAMPLE_CSV_PATH = Path(__file__).resolve().parent.parent / "data" / "movielist.csv"


@pytest.fixture(scope="session")
def sample_csv_path() -> Path:
    """Path to the movie list shipped with the repo."""
    return SAMPLE_CSV_PATH


@pytest_asyncio.fixture()
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Yield an engine over a private in-memory database with the schema created."""
    # Ensure SQLModel metadata is populated before creating tables.
    from app.schemas import movies  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a session bound to the test's own database."""
    session_factory = async_sessionmaker(
        async_engine, expire_on_commit=False, class_=AsyncSession
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest_asyncio.fixture()
async def app_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client with the application wired to the test session."""
    from app.main import app
    from app.utils.db_async import get_session

    async def _get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_session] = _get_session_override
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_session, None)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Ensure HTTPX uses asyncio backend during tests."""
    return "asyncio"
