"""Playlist Rules — tests for pure name validation, update filtering and video sets."""

import pytest

from tubehub.core.errors import ValidationError
from tubehub.core.playlist_rules import (
    MAX_NAME_LENGTH,
    NAME_REQUIRED_MESSAGE,
    add_to_video_set,
    build_playlist_changes,
    is_playlist_owner,
    normalize_description,
    remove_from_video_set,
    validate_playlist_name,
)


# ─── validate_playlist_name ──────────────────────────────────────

@pytest.mark.parametrize("name", [None, "", "   \t"])
def test_missing_name_rejected(name):
    with pytest.raises(ValidationError) as exc:
        validate_playlist_name(name)
    assert exc.value.message == NAME_REQUIRED_MESSAGE == "Name is required"
    assert exc.value.http_status == 400
    assert exc.value.field == "name"


def test_name_is_stripped():
    assert validate_playlist_name("  My Playlist ") == "My Playlist"


def test_overlong_name_rejected():
    with pytest.raises(ValidationError):
        validate_playlist_name("x" * (MAX_NAME_LENGTH + 1))


def test_normalize_description():
    assert normalize_description(None) == ""
    assert normalize_description("  chill  ") == "chill"


# ─── build_playlist_changes ──────────────────────────────────────

def test_changes_only_include_provided_fields():
    assert build_playlist_changes({"name": " New "}) == {"name": "New"}
    assert build_playlist_changes({"description": "d"}) == {"description": "d"}
    assert build_playlist_changes({}) == {}


def test_changes_drop_unknown_fields():
    assert build_playlist_changes({"owner": "someone", "name": "N"}) == {"name": "N"}


def test_changes_reject_blank_name():
    with pytest.raises(ValidationError):
        build_playlist_changes({"name": "  "})


# ─── video sets ──────────────────────────────────────────────────

def test_add_new_video():
    videos, changed = add_to_video_set(["a"], "b")
    assert videos == ["a", "b"]
    assert changed is True


def test_add_existing_video_is_noop():
    original = ["a", "b"]
    videos, changed = add_to_video_set(original, "a")
    assert videos == ["a", "b"]
    assert changed is False


def test_remove_present_video():
    videos, changed = remove_from_video_set(["a", "b"], "a")
    assert videos == ["b"]
    assert changed is True


def test_remove_absent_video_is_noop():
    videos, changed = remove_from_video_set(["a"], "z")
    assert videos == ["a"]
    assert changed is False


def test_is_playlist_owner():
    playlist = {"owner": "u1"}
    assert is_playlist_owner(playlist, "u1")
    assert not is_playlist_owner(playlist, "u2")
    assert not is_playlist_owner(playlist, None)
