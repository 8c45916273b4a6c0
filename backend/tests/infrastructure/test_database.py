"""Database Session Manager — error mapping, rollback, foreign keys, health check.

Invariants verified:
    - Generic constraint and operational failures → DatabaseError (503)
    - A second insert of the same subscription pair → ConflictError (409, status envelope)
    - A second insert of the same playlist video → ConflictError (409, plain envelope)
    - SQLite sessions enforce foreign keys, so unknown users are caught before writing
"""

import pytest
from sqlalchemy import select, text

from tubehub.core.errors import (
    ConflictError, DatabaseError, ResourceNotFoundError,
)
from tubehub.core.identifiers import new_identifier
from tubehub.infrastructure.database import DatabaseSessionManager
from tubehub.infrastructure.repositories import (
    SqlSubscriptionRepository, SqlUserRepository,
)
from tubehub.models.playlist import Playlist, PlaylistVideo
from tubehub.models.subscription import Subscription
from tubehub.models.user import User
from tubehub.services.subscription_service import SubscriptionService


@pytest.fixture
async def manager(database_url, test_engine):
    mgr = DatabaseSessionManager(database_url)
    yield mgr
    await mgr.dispose()


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_foreign_keys_enabled_on_sqlite(manager):
    async with manager.session() as db:
        result = await db.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1


async def test_integrity_error_mapped(manager, alice):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            db.add(User(username="alice"))
            await db.commit()
    assert exc.value.http_status == 503
    assert exc.value.operation == "commit"
    assert exc.value.message == "Database commit failed: Integrity constraint violated"


async def test_dangling_reference_rejected(manager, alice):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            db.add(Subscription(channel_id=new_identifier(), subscriber_id=alice.id))
            await db.commit()
    assert exc.value.message == "Database commit failed: Referenced record does not exist"


async def test_racing_subscription_insert_is_conflict(manager, alice, bob):
    async with manager.session() as first:
        await SqlSubscriptionRepository(first).create(bob.id, alice.id)

    with pytest.raises(ConflictError) as exc:
        async with manager.session() as second:
            await SqlSubscriptionRepository(second).create(bob.id, alice.id)
    assert exc.value.http_status == 409
    assert exc.value.to_response() == {
        "status": "error",
        "message": "Subscription was toggled by a concurrent request",
    }

    async with manager.session() as db:
        result = await db.execute(select(Subscription.id))
        assert len(result.scalars().all()) == 1


async def test_racing_playlist_video_insert_is_conflict(manager, alice, video):
    async with manager.session() as db:
        playlist = Playlist(name="Race", description="", owner_id=alice.id)
        db.add(playlist)
        await db.commit()
        playlist_id = playlist.id
        db.add(PlaylistVideo(playlist_id=playlist_id, video_id=video.id))
        await db.commit()

    with pytest.raises(ConflictError) as exc:
        async with manager.session() as db:
            db.add(PlaylistVideo(playlist_id=playlist_id, video_id=video.id))
            await db.commit()
    assert exc.value.to_response() == {
        "message": "Video was added to the playlist by a concurrent request",
    }


async def test_toggle_unknown_channel_with_foreign_keys(manager, alice):
    with pytest.raises(ResourceNotFoundError) as exc:
        async with manager.session() as db:
            service = SubscriptionService(
                SqlSubscriptionRepository(db), SqlUserRepository(db),
            )
            await service.toggle_subscription(new_identifier(), alice.id)
    assert exc.value.http_status == 404
    assert exc.value.message == "Channel not found"


async def test_toggle_known_channel_with_foreign_keys(manager, alice, bob):
    async with manager.session() as db:
        service = SubscriptionService(
            SqlSubscriptionRepository(db), SqlUserRepository(db),
        )
        result = await service.toggle_subscription(bob.id, alice.id)
    assert result == {
        "status": "success", "message": "Subscription toggled successfully",
    }


async def test_operational_error_mapped(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.operation == "execute"


async def test_health_check_fails_on_bad_database(tmp_path):
    mgr = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}",
    )
    assert await mgr.health_check() is False
    await mgr.dispose()
