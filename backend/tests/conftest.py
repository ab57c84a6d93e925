"""
Shared pytest fixtures.

Every test gets its own SQLite database (aiosqlite) seeded with the
reference roles, users, walk difficulties and regions. The FastAPI app's
get_db dependency is overridden to hand out sessions on that database.
"""

import os

# Settings are read on first import; keep the suite off any real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./walks_api_import.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from walks_api.auth.jwt import create_access_token, pwd_context
from walks_api.database import Base, get_db
from walks_api.main import app
from walks_api.models import Region, User, WalkDifficulty
from walks_api.seed import seed_database

# Cheap hashes; the cost factor does not matter for behaviour
pwd_context.update(bcrypt__rounds=4)

WRITER_USERNAME = "readwrite@user.com"
WRITER_PASSWORD = "Readwrite@user"
READER_USERNAME = "readonly@user.com"
READER_PASSWORD = "Readonly@user"


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'walks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await seed_database(session)

    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """HTTPX AsyncClient talking to the app through ASGITransport."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _user(session: AsyncSession, username: str) -> User:
    result = await session.execute(select(User).where(User.username == username))
    return result.scalar_one()


@pytest_asyncio.fixture
async def writer_headers(db_session):
    token = create_access_token(await _user(db_session, WRITER_USERNAME))
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def reader_headers(db_session):
    token = create_access_token(await _user(db_session, READER_USERNAME))
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def region(db_session) -> Region:
    result = await db_session.execute(select(Region).where(Region.code == "WGN"))
    return result.scalar_one()


@pytest_asyncio.fixture
async def walk_difficulty(db_session) -> WalkDifficulty:
    result = await db_session.execute(select(WalkDifficulty).where(WalkDifficulty.code == "Medium"))
    return result.scalar_one()
