"""Subscription Repository — SQLAlchemy implementation of SubscriptionRepository."""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from tubehub.models.subscription import Subscription


def _to_dict(subscription: Subscription) -> dict:
    return {
        "id": subscription.id,
        "channelId": subscription.channel_id,
        "subscriberId": subscription.subscriber_id,
    }


class SqlSubscriptionRepository:
    """Subscription persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, channel_id: str, subscriber_id: str) -> dict | None:
        result = await self.db.execute(
            select(Subscription)
            .where(Subscription.channel_id == channel_id)
            .where(Subscription.subscriber_id == subscriber_id)
        )
        subscription = result.scalar_one_or_none()
        return _to_dict(subscription) if subscription else None

    async def create(self, channel_id: str, subscriber_id: str) -> dict:
        subscription = Subscription(
            channel_id=channel_id, subscriber_id=subscriber_id,
        )
        self.db.add(subscription)
        await self.db.commit()
        return _to_dict(subscription)

    async def delete(self, channel_id: str, subscriber_id: str) -> int:
        result = await self.db.execute(
            delete(Subscription)
            .where(Subscription.channel_id == channel_id)
            .where(Subscription.subscriber_id == subscriber_id)
        )
        await self.db.commit()
        return result.rowcount

    async def list_subscribers(self, channel_id: str) -> list[str]:
        result = await self.db.execute(
            select(Subscription.subscriber_id)
            .where(Subscription.channel_id == channel_id)
            .order_by(Subscription.created_at)
        )
        return list(result.scalars().all())

    async def list_channels(self, subscriber_id: str) -> list[str]:
        result = await self.db.execute(
            select(Subscription.channel_id)
            .where(Subscription.subscriber_id == subscriber_id)
            .order_by(Subscription.created_at)
        )
        return list(result.scalars().all())
