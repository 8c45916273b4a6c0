"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - Seed helpers commit, so request-scoped sessions see the rows

Design Decisions:
    - File-backed SQLite over :memory:: each session gets its own connection,
      so request sessions and the test_db session do not share a transaction
"""

import os

# Ensure tests never reach a real database or production secret
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-with-at-least-32-bytes")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from tubehub.db.base import Base  # noqa: E402
import tubehub.models  # noqa: E402,F401
from tubehub.models.user import User  # noqa: E402
from tubehub.models.video import Video  # noqa: E402


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'tubehub-test.db'}"


@pytest.fixture
async def test_engine(database_url):
    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def alice(test_db):
    user = User(username="alice")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def bob(test_db):
    user = User(username="bob")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def video(test_db, bob):
    clip = Video(title="Cat compilation", owner_id=bob.id)
    test_db.add(clip)
    await test_db.commit()
    return clip
