"""Playlist Routes — CRUD plus video membership, all behind the JWT gate.

Invariants:
    - Router-level verify_jwt: no handler runs without a verified bearer token
    - Mutations act on behalf of the authenticated user (ownership enforced in service)
    - Errors rendered as {"message": ...}
    - Create answers on the collection path with or without a trailing slash
"""

from fastapi import APIRouter, Depends, status

from tubehub.api.dependencies import get_playlist_service, verify_jwt
from tubehub.core.domain_types import UserId
from tubehub.schemas.playlist import PlaylistCreate, PlaylistUpdate
from tubehub.services.playlist_service import PlaylistService

router = APIRouter(
    prefix="/api/v1/playlists", tags=["playlists"],
    dependencies=[Depends(verify_jwt)],
)


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_playlist(
    body: PlaylistCreate | None = None,
    user_id: UserId = Depends(verify_jwt),
    service: PlaylistService = Depends(get_playlist_service),
):
    body = body or PlaylistCreate()
    return await service.create_playlist(body.name, body.description, user_id)


@router.get("/user/{user_id}")
async def get_user_playlists(
    user_id: str,
    service: PlaylistService = Depends(get_playlist_service),
):
    return await service.get_user_playlists(user_id)


@router.patch("/add/{video_id}/{playlist_id}")
async def add_video_to_playlist(
    video_id: str,
    playlist_id: str,
    user_id: UserId = Depends(verify_jwt),
    service: PlaylistService = Depends(get_playlist_service),
):
    return await service.add_video_to_playlist(video_id, playlist_id, user_id)


@router.patch("/remove/{video_id}/{playlist_id}")
async def remove_video_from_playlist(
    video_id: str,
    playlist_id: str,
    user_id: UserId = Depends(verify_jwt),
    service: PlaylistService = Depends(get_playlist_service),
):
    return await service.remove_video_from_playlist(
        video_id, playlist_id, user_id,
    )


@router.get("/{playlist_id}")
async def get_playlist_by_id(
    playlist_id: str,
    service: PlaylistService = Depends(get_playlist_service),
):
    return await service.get_playlist_by_id(playlist_id)


@router.patch("/{playlist_id}")
async def update_playlist(
    playlist_id: str,
    body: PlaylistUpdate | None = None,
    user_id: UserId = Depends(verify_jwt),
    service: PlaylistService = Depends(get_playlist_service),
):
    fields = body.provided_fields() if body else {}
    return await service.update_playlist(playlist_id, fields, user_id)


@router.delete("/{playlist_id}")
async def delete_playlist(
    playlist_id: str,
    user_id: UserId = Depends(verify_jwt),
    service: PlaylistService = Depends(get_playlist_service),
):
    return await service.delete_playlist(playlist_id, user_id)
