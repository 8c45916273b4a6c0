"""Playlist Repository — SQLAlchemy implementation of PlaylistRepository.

Invariants:
    - get_by_id always reloads entries (populate_existing) so video sets are current
    - add_video is idempotent at the storage level (composite primary key)
    - delete removes membership rows through the ORM cascade
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from tubehub.models.playlist import Playlist, PlaylistVideo


def playlist_to_dict(playlist: Playlist) -> dict:
    return {
        "id": playlist.id,
        "name": playlist.name,
        "description": playlist.description,
        "owner": playlist.owner_id,
        "videos": playlist.video_ids,
        "created_at": playlist.created_at.isoformat(),
        "updated_at": playlist.updated_at.isoformat(),
    }


class SqlPlaylistRepository:
    """Playlist persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _load(self, playlist_id: str) -> Playlist | None:
        result = await self.db.execute(
            select(Playlist)
            .where(Playlist.id == playlist_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(self, name: str, description: str, owner_id: str) -> str:
        playlist = Playlist(
            name=name, description=description, owner_id=owner_id,
        )
        self.db.add(playlist)
        await self.db.commit()
        return playlist.id

    async def get_by_id(self, playlist_id: str) -> dict | None:
        playlist = await self._load(playlist_id)
        return playlist_to_dict(playlist) if playlist else None

    async def update(self, playlist_id: str, changes: dict) -> None:
        playlist = await self._load(playlist_id)
        if playlist is None:
            return
        for field, value in changes.items():
            setattr(playlist, field, value)
        await self.db.commit()

    async def delete(self, playlist_id: str) -> int:
        playlist = await self._load(playlist_id)
        if playlist is None:
            return 0
        await self.db.delete(playlist)
        await self.db.commit()
        return 1

    async def add_video(self, playlist_id: str, video_id: str) -> None:
        existing = await self.db.get(PlaylistVideo, (playlist_id, video_id))
        if existing is not None:
            return
        self.db.add(PlaylistVideo(playlist_id=playlist_id, video_id=video_id))
        await self.db.commit()

    async def remove_video(self, playlist_id: str, video_id: str) -> None:
        await self.db.execute(
            delete(PlaylistVideo)
            .where(PlaylistVideo.playlist_id == playlist_id)
            .where(PlaylistVideo.video_id == video_id)
        )
        await self.db.commit()

    async def list_by_owner(self, owner_id: str) -> list[dict]:
        result = await self.db.execute(
            select(Playlist)
            .where(Playlist.owner_id == owner_id)
            .order_by(Playlist.created_at.desc())
        )
        return [playlist_to_dict(p) for p in result.scalars().all()]
