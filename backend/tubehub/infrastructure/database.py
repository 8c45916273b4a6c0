"""Database Session Manager — async engine, request sessions, constraint mapping.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Unique-key races on subscriptions and playlist videos surface as ConflictError (409)
    - Every other SQLAlchemy exception surfaces as DatabaseError (503)
    - SQLite connections enforce foreign keys, like the Postgres target

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: repositories return dicts built after commit
    - Constraint violations recognised from the driver message: Postgres reports
      the constraint name, SQLite reports the column list
    - Pool sizing only for server databases; SQLite uses SQLAlchemy's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from tubehub.core.domain_types import ResponseEnvelope
from tubehub.core.errors import ConflictError, DatabaseError, TubeHubError

logger = logging.getLogger(__name__)


# (markers in the driver message, message, envelope of the surface that writes it)
_RACE_CONSTRAINTS: tuple[tuple[tuple[str, ...], str, ResponseEnvelope], ...] = (
    (
        ("uq_subscription_pair",
         "subscriptions.channel_id, subscriptions.subscriber_id"),
        "Subscription was toggled by a concurrent request",
        ResponseEnvelope.STATUS,
    ),
    (
        ("playlist_videos_pkey",
         "playlist_videos.playlist_id, playlist_videos.video_id"),
        "Video was added to the playlist by a concurrent request",
        ResponseEnvelope.PLAIN,
    ),
)


def integrity_error_to_domain(error: IntegrityError) -> TubeHubError:
    """Translate a constraint violation into the error the client should see."""
    detail = str(error.orig)
    for markers, message, envelope in _RACE_CONSTRAINTS:
        if any(marker in detail for marker in markers):
            return ConflictError(message, envelope=envelope)
    if "foreign key" in detail.lower():
        return DatabaseError("Referenced record does not exist", "commit")
    return DatabaseError("Integrity constraint violated", "commit")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Owns the engine and hands out request-scoped sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        is_sqlite = database_url.startswith("sqlite")
        if not is_sqlite:
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if is_sqlite:
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback and domain error mapping."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            mapped = integrity_error_to_domain(e)
            log = logger.warning if isinstance(mapped, ConflictError) else logger.error
            log(f"DB integrity error: {e.orig}", extra={"error_code": mapped.code})
            raise mapped from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when a trivial query round-trips (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
