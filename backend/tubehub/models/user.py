"""User ORM — account that owns channels, videos, subscriptions and playlists.

Invariants:
    - username is unique and non-nullable
    - A user's id doubles as its channel id
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from tubehub.core.identifiers import IDENTIFIER_LENGTH, new_identifier
from tubehub.db.base import Base


class User(Base):
    """User entity — referenced by identifier, not mutated by handlers."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier,
    )
    username: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
