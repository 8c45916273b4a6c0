"""Playlist ORM — named, owned set of videos.

Invariants:
    - name is non-nullable; emptiness is rejected before reaching the model
    - Video membership stored as PlaylistVideo rows keyed by (playlist_id, video_id)
      so a video appears at most once per playlist
    - Deleting a playlist deletes its PlaylistVideo rows

Design Decisions:
    - Association object over bare secondary table: keeps added_at for ordering
    - entries loaded with selectin: async sessions cannot lazy-load on access
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tubehub.core.identifiers import IDENTIFIER_LENGTH, new_identifier
from tubehub.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Playlist(Base):
    """Playlist entity — owned by one user, holds a set of videos."""
    __tablename__ = "playlists"

    id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier,
    )
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    owner_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )

    entries: Mapped[list["PlaylistVideo"]] = relationship(
        "PlaylistVideo", back_populates="playlist",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="PlaylistVideo.added_at",
    )

    @property
    def video_ids(self) -> list[str]:
        return [entry.video_id for entry in self.entries]


class PlaylistVideo(Base):
    """Membership row — one video in one playlist."""
    __tablename__ = "playlist_videos"

    playlist_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH),
        ForeignKey("playlists.id", ondelete="CASCADE"), primary_key=True,
    )
    video_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH),
        ForeignKey("videos.id", ondelete="CASCADE"), primary_key=True,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )

    playlist: Mapped["Playlist"] = relationship(
        "Playlist", back_populates="entries",
    )
