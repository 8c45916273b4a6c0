"""API test fixtures — FastAPI test client over the per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - alice_headers / bob_headers carry tokens minted with the same secret the app verifies with
"""

from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from tubehub.config import get_settings
from tubehub.infrastructure.database import get_db, DatabaseSessionManager
import tubehub.infrastructure.database as db_module
from tubehub.infrastructure.jwt_verifier import issue_token
from tubehub.main import app
from tubehub.models.playlist import Playlist


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


def _bearer(user_id: str) -> dict:
    settings = get_settings()
    token = issue_token(
        user_id, settings.jwt_secret, settings.jwt_algorithm,
        expires_in=timedelta(minutes=settings.jwt_expire_minutes),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(alice):
    return _bearer(alice.id)


@pytest.fixture
def bob_headers(bob):
    return _bearer(bob.id)


@pytest.fixture
async def alice_playlist(test_db, alice):
    playlist = Playlist(name="My Playlist", description="", owner_id=alice.id)
    test_db.add(playlist)
    await test_db.commit()
    return playlist
