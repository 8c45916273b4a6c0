"""Subscription Handlers — toggle_subscription, get_channel_subscribers, get_subscribed_channels.

Invariants:
    - Identifiers validated BEFORE any repository call
    - Channel and subscriber must be existing users before a toggle writes
    - Toggle reads existence once, asks core for the action, writes once
    - Empty result sets are successes, never errors

Design Decisions:
    - Repositories and identifier predicate injected via constructor: routes build
      the SQLAlchemy repositories, tests pass in-memory fakes
    - No locking: concurrent toggles on one pair rely on the storage unique
      constraint, surfaced as ConflictError by the session manager
"""

import logging

from tubehub.core.domain_types import (
    ChannelId, ResponseEnvelope, SubscriberId, ToggleAction, UserId,
)
from tubehub.core.errors import ResourceNotFoundError
from tubehub.core.identifiers import (
    IdentifierValidator, is_valid_identifier, require_identifier,
)
from tubehub.core.repository_protocols import (
    SubscriptionRepository, UserRepository,
)
from tubehub.core.subscription_toggle import next_toggle_action, toggle_response

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Request handlers for the subscription surface."""

    def __init__(
        self,
        subscriptions: SubscriptionRepository,
        users: UserRepository,
        is_valid_id: IdentifierValidator = is_valid_identifier,
    ):
        self.subscriptions = subscriptions
        self.users = users
        self.is_valid_id = is_valid_id

    async def _require_user(self, user_id: str, resource_type: str) -> None:
        if not await self.users.exists(UserId(user_id)):
            raise ResourceNotFoundError(
                resource_type, user_id, envelope=ResponseEnvelope.STATUS,
            )

    async def toggle_subscription(
        self, channel_id: str | None, subscriber_id: str | None,
    ) -> dict:
        """Subscribe if absent, unsubscribe if present."""
        channel = ChannelId(
            require_identifier(channel_id, "channelId", self.is_valid_id),
        )
        subscriber = SubscriberId(
            require_identifier(subscriber_id, "subscriberId", self.is_valid_id),
        )
        await self._require_user(channel, "Channel")
        await self._require_user(subscriber, "Subscriber")

        existing = await self.subscriptions.find(channel, subscriber)
        action = next_toggle_action(existing is not None)

        if action == ToggleAction.UNSUBSCRIBE:
            await self.subscriptions.delete(channel, subscriber)
        else:
            await self.subscriptions.create(channel, subscriber)

        logger.info(
            f"Subscription {action.value}d",
            extra={"channel_id": channel, "user_id": subscriber},
        )
        return toggle_response()

    async def get_channel_subscribers(self, channel_id: str | None) -> dict:
        channel = ChannelId(
            require_identifier(channel_id, "channelId", self.is_valid_id),
        )
        subscribers = await self.subscriptions.list_subscribers(channel)
        return {"status": "success", "subscribers": subscribers}

    async def get_subscribed_channels(self, subscriber_id: str | None) -> dict:
        subscriber = SubscriberId(
            require_identifier(subscriber_id, "subscriberId", self.is_valid_id),
        )
        channels = await self.subscriptions.list_channels(subscriber)
        return {"status": "success", "channels": channels}
