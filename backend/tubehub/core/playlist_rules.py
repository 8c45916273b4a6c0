"""Playlist Rules — pure validation and shaping for playlist operations.

Invariants:
    - validate_playlist_name strips whitespace; blank or missing → ValidationError
    - build_playlist_changes only emits updatable fields (name, description)
    - Video membership has set semantics: add/remove report whether anything changed
    - Shell applies the returned changes; nothing here touches storage
"""

from tubehub.core.errors import ValidationError

NAME_REQUIRED_MESSAGE: str = "Name is required"
MAX_NAME_LENGTH: int = 150
UPDATABLE_FIELDS: tuple[str, ...] = ("name", "description")


def validate_playlist_name(name: str | None) -> str:
    """Return the stripped name, or raise when it is missing/blank."""
    if name is None or not name.strip():
        raise ValidationError(NAME_REQUIRED_MESSAGE, field="name")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name must be at most {MAX_NAME_LENGTH} characters", field="name",
        )
    return name


def normalize_description(description: str | None) -> str:
    return (description or "").strip()


def build_playlist_changes(fields: dict) -> dict:
    """Filter an update payload down to validated, updatable fields.

    Only keys present in `fields` are applied; a provided name must be non-blank.
    """
    changes: dict = {}
    if "name" in fields:
        changes["name"] = validate_playlist_name(fields["name"])
    if "description" in fields:
        changes["description"] = normalize_description(fields["description"])
    return changes


def add_to_video_set(videos: list[str], video_id: str) -> tuple[list[str], bool]:
    """Append video_id unless already present. Returns (videos, changed)."""
    if video_id in videos:
        return list(videos), False
    return [*videos, video_id], True


def remove_from_video_set(videos: list[str], video_id: str) -> tuple[list[str], bool]:
    """Drop video_id if present. Returns (videos, changed)."""
    if video_id not in videos:
        return list(videos), False
    return [v for v in videos if v != video_id], True


def is_playlist_owner(playlist: dict, user_id: str | None) -> bool:
    return user_id is not None and playlist.get("owner") == user_id
