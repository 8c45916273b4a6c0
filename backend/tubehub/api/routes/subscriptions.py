"""Subscription Routes — toggle a subscription, list subscribers, list subscribed channels.

Invariants:
    - Toggle always requires an authenticated subscriber (the token's user)
    - Read routes are gated only when settings.subscription_auth_required is set
    - Errors rendered as {"status": "error", "message": ...}
"""

from fastapi import APIRouter, Depends

from tubehub.api.dependencies import (
    get_subscription_service, verify_jwt, verify_jwt_if_required,
)
from tubehub.core.domain_types import UserId
from tubehub.services.subscription_service import SubscriptionService

router = APIRouter(prefix="/api/v1/subscriptions", tags=["subscriptions"])


@router.post("/c/{channel_id}")
async def toggle_subscription(
    channel_id: str,
    user_id: UserId = Depends(verify_jwt),
    service: SubscriptionService = Depends(get_subscription_service),
):
    """Subscribe the caller to the channel, or unsubscribe if already subscribed."""
    return await service.toggle_subscription(channel_id, user_id)


@router.get(
    "/c/{channel_id}", dependencies=[Depends(verify_jwt_if_required)],
)
async def get_user_channel_subscribers(
    channel_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
):
    return await service.get_channel_subscribers(channel_id)


@router.get(
    "/u/{subscriber_id}", dependencies=[Depends(verify_jwt_if_required)],
)
async def get_subscribed_channels(
    subscriber_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
):
    return await service.get_subscribed_channels(subscriber_id)
