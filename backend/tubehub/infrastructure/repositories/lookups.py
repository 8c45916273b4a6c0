"""Existence Lookups — SQLAlchemy implementations of UserRepository and VideoRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tubehub.models.user import User
from tubehub.models.video import Video


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, user_id: str) -> bool:
        result = await self.db.execute(select(User.id).where(User.id == user_id))
        return result.scalar_one_or_none() is not None


class SqlVideoRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, video_id: str) -> bool:
        result = await self.db.execute(
            select(Video.id).where(Video.id == video_id),
        )
        return result.scalar_one_or_none() is not None
