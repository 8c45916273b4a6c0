"""Playlist Handlers — create, get, update, delete, add/remove video, list by user.

Invariants:
    - Malformed ids can never match a record: reported as NotFound without a lookup
    - Existence checks precede ownership checks precede mutations
    - Video membership has set semantics (re-adding / re-removing is a no-op)
    - Only the playlist owner may mutate it
    - A playlist is only stored for an owner that exists

Design Decisions:
    - Repositories injected via constructor (same seam as SubscriptionService)
    - Video checked before playlist on add/remove: "Video not found" wins when both
      are missing, matching the order the routes take their path parameters
"""

import logging

from tubehub.core.domain_types import PlaylistId, UserId, VideoId
from tubehub.core.errors import (
    ErrorContext, PermissionDeniedError, ResourceNotFoundError,
)
from tubehub.core.identifiers import IdentifierValidator, is_valid_identifier
from tubehub.core.playlist_rules import (
    add_to_video_set,
    build_playlist_changes,
    is_playlist_owner,
    normalize_description,
    remove_from_video_set,
    validate_playlist_name,
)
from tubehub.core.repository_protocols import (
    PlaylistRepository, UserRepository, VideoRepository,
)

logger = logging.getLogger(__name__)

NOT_OWNER_MESSAGE = "You do not own this playlist"


class PlaylistService:
    """Request handlers for the playlist surface."""

    def __init__(
        self,
        playlists: PlaylistRepository,
        videos: VideoRepository,
        users: UserRepository,
        is_valid_id: IdentifierValidator = is_valid_identifier,
    ):
        self.playlists = playlists
        self.videos = videos
        self.users = users
        self.is_valid_id = is_valid_id

    # ─── Lookups ─────────────────────────────────────────────────

    async def _get_playlist_or_404(self, playlist_id: str | None) -> dict:
        if not playlist_id or not self.is_valid_id(playlist_id):
            raise ResourceNotFoundError("Playlist", playlist_id)
        playlist = await self.playlists.get_by_id(PlaylistId(playlist_id))
        if playlist is None:
            raise ResourceNotFoundError("Playlist", playlist_id)
        return playlist

    async def _require_video(self, video_id: str | None) -> VideoId:
        if not video_id or not self.is_valid_id(video_id):
            raise ResourceNotFoundError("Video", video_id)
        if not await self.videos.exists(VideoId(video_id)):
            raise ResourceNotFoundError("Video", video_id)
        return VideoId(video_id)

    async def _get_owned_playlist(
        self, playlist_id: str | None, user_id: str | None,
    ) -> dict:
        playlist = await self._get_playlist_or_404(playlist_id)
        if not is_playlist_owner(playlist, user_id):
            logger.warning(
                "Playlist mutation by non-owner rejected",
                extra={"playlist_id": playlist_id, "user_id": user_id},
            )
            raise PermissionDeniedError(
                NOT_OWNER_MESSAGE,
                ErrorContext(user_id=user_id, resource_id=playlist_id),
            )
        return playlist

    # ─── Handlers ────────────────────────────────────────────────

    async def create_playlist(
        self, name: str | None, description: str | None, owner_id: str,
    ) -> dict:
        clean_name = validate_playlist_name(name)
        if not owner_id or not await self.users.exists(UserId(owner_id)):
            raise ResourceNotFoundError("User", owner_id)
        playlist_id = await self.playlists.create(
            clean_name, normalize_description(description), UserId(owner_id),
        )
        logger.info(
            f"Playlist created: {clean_name}",
            extra={"playlist_id": playlist_id, "user_id": owner_id},
        )
        return {"playlistId": playlist_id}

    async def get_playlist_by_id(self, playlist_id: str | None) -> dict:
        playlist = await self._get_playlist_or_404(playlist_id)
        return {"playlist": playlist}

    async def update_playlist(
        self, playlist_id: str | None, fields: dict, user_id: str | None,
    ) -> dict:
        playlist = await self._get_owned_playlist(playlist_id, user_id)
        changes = build_playlist_changes(fields)
        if changes:
            await self.playlists.update(PlaylistId(playlist["id"]), changes)
            logger.info(
                f"Playlist updated: {', '.join(sorted(changes))}",
                extra={"playlist_id": playlist["id"], "user_id": user_id},
            )
        return {"message": "Playlist updated"}

    async def delete_playlist(
        self, playlist_id: str | None, user_id: str | None,
    ) -> dict:
        playlist = await self._get_owned_playlist(playlist_id, user_id)
        await self.playlists.delete(PlaylistId(playlist["id"]))
        logger.info(
            "Playlist deleted",
            extra={"playlist_id": playlist["id"], "user_id": user_id},
        )
        return {"message": "Playlist deleted"}

    async def add_video_to_playlist(
        self, video_id: str | None, playlist_id: str | None, user_id: str | None,
    ) -> dict:
        video = await self._require_video(video_id)
        playlist = await self._get_owned_playlist(playlist_id, user_id)
        _, changed = add_to_video_set(playlist["videos"], video)
        if changed:
            await self.playlists.add_video(PlaylistId(playlist["id"]), video)
        return {"message": "Video added"}

    async def remove_video_from_playlist(
        self, video_id: str | None, playlist_id: str | None, user_id: str | None,
    ) -> dict:
        video = await self._require_video(video_id)
        playlist = await self._get_owned_playlist(playlist_id, user_id)
        _, changed = remove_from_video_set(playlist["videos"], video)
        if changed:
            await self.playlists.remove_video(PlaylistId(playlist["id"]), video)
        return {"message": "Video removed"}

    async def get_user_playlists(self, user_id: str | None) -> dict:
        if not user_id or not self.is_valid_id(user_id):
            raise ResourceNotFoundError("User", user_id)
        if not await self.users.exists(UserId(user_id)):
            raise ResourceNotFoundError("User", user_id)
        playlists = await self.playlists.list_by_owner(UserId(user_id))
        return {"playlists": playlists}
