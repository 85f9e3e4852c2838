"""
Pytest fixtures - per-test SQLite database, seeded roster, HTTP client.
Challenge: Isolated tests; every test gets a fresh database file.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roster.db.base import Base
from roster.db.models import Member, Team
from roster.db.seed import seed_demo_roster
from roster.db.session import get_db
from roster.main import app


def sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(sqlite_url(tmp_path / "test.db"), echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def roster(session: AsyncSession) -> tuple[list[Team], list[Member]]:
    """team1: member1 (10), member2 (20); team2: member3 (30), member4 (40)."""
    teams, members = await seed_demo_roster(session)
    await session.commit()
    return teams, members


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
