"""Video ORM — uploaded video that playlists reference."""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from tubehub.core.identifiers import IDENTIFIER_LENGTH, new_identifier
from tubehub.db.base import Base


class Video(Base):
    __tablename__ = "videos"

    id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    owner_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), ForeignKey("users.id"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
