"""Subscription ORM — a subscriber following a channel.

Invariants:
    - At most one row per (channel_id, subscriber_id) — unique constraint
    - Both sides are user ids (a channel is a user)

Design Decisions:
    - Surrogate id plus unique pair: a racing second toggle fails with an
      IntegrityError instead of silently duplicating
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tubehub.core.identifiers import IDENTIFIER_LENGTH, new_identifier
from tubehub.db.base import Base


class Subscription(Base):
    """Subscription entity — toggled on and off by the subscriber."""
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint(
            "channel_id", "subscriber_id", name="uq_subscription_pair",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), primary_key=True, default=new_identifier,
    )
    channel_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    subscriber_id: Mapped[str] = mapped_column(
        String(IDENTIFIER_LENGTH), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
