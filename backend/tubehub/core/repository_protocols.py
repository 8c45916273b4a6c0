"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping; in-memory fakes in tests satisfy
      the same contract as the SQLAlchemy repositories without inheritance
    - Repositories return plain dicts, never ORM objects: handlers shape JSON
      from dicts and stay decoupled from the session lifecycle
    - Async in Protocol: every storage access is a suspension point
"""

from typing import Protocol

from tubehub.core.domain_types import (
    ChannelId, SubscriberId, PlaylistId, VideoId, UserId,
)


class SubscriptionRepository(Protocol):
    """Contract for subscription persistence — implemented by shell."""
    async def find(
        self, channel_id: ChannelId, subscriber_id: SubscriberId,
    ) -> dict | None: ...
    async def create(
        self, channel_id: ChannelId, subscriber_id: SubscriberId,
    ) -> dict: ...
    async def delete(
        self, channel_id: ChannelId, subscriber_id: SubscriberId,
    ) -> int: ...
    async def list_subscribers(self, channel_id: ChannelId) -> list[str]: ...
    async def list_channels(self, subscriber_id: SubscriberId) -> list[str]: ...


class PlaylistRepository(Protocol):
    """Contract for playlist persistence — implemented by shell."""
    async def create(
        self, name: str, description: str, owner_id: UserId,
    ) -> PlaylistId: ...
    async def get_by_id(self, playlist_id: PlaylistId) -> dict | None: ...
    async def update(self, playlist_id: PlaylistId, changes: dict) -> None: ...
    async def delete(self, playlist_id: PlaylistId) -> int: ...
    async def add_video(self, playlist_id: PlaylistId, video_id: VideoId) -> None: ...
    async def remove_video(
        self, playlist_id: PlaylistId, video_id: VideoId,
    ) -> None: ...
    async def list_by_owner(self, owner_id: UserId) -> list[dict]: ...


class VideoRepository(Protocol):
    """Contract for video lookup — implemented by shell."""
    async def exists(self, video_id: VideoId) -> bool: ...


class UserRepository(Protocol):
    """Contract for user lookup — implemented by shell."""
    async def exists(self, user_id: UserId) -> bool: ...


class TokenVerifier(Protocol):
    """Contract for bearer token verification — implemented by shell.

    verify() returns the authenticated user id or raises AuthenticationError.
    """
    def verify(self, token: str) -> UserId: ...
