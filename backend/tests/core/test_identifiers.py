"""Identifier Validation — format predicate, generator and require_identifier.

Tests cover:
    - 24-hex strings accepted regardless of case
    - Empty, short, long, non-hex and non-string values rejected
    - new_identifier output is valid and unique
    - require_identifier raises Missing before Invalid, and honours a custom predicate
"""

import pytest

from tubehub.core.errors import InvalidIdentifierError, MissingParameterError
from tubehub.core.identifiers import (
    IDENTIFIER_LENGTH,
    is_valid_identifier,
    new_identifier,
    require_identifier,
)


# ─── is_valid_identifier ─────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "65f1c0de0123456789abcdef",
    "65F1C0DE0123456789ABCDEF",
    "000000000000000000000000",
])
def test_well_formed_identifiers_are_valid(value):
    assert is_valid_identifier(value) is True


@pytest.mark.parametrize("value", [
    "",
    "invalidChannelId",
    "65f1c0de0123456789abcde",
    "65f1c0de0123456789abcdef0",
    "65f1c0de0123456789abcdeg",
    " 65f1c0de0123456789abcde",
    None,
    12345,
])
def test_malformed_identifiers_are_invalid(value):
    assert is_valid_identifier(value) is False


# ─── new_identifier ──────────────────────────────────────────────

def test_new_identifier_is_valid():
    ident = new_identifier()
    assert len(ident) == IDENTIFIER_LENGTH
    assert is_valid_identifier(ident)


def test_new_identifiers_are_unique():
    assert len({new_identifier() for _ in range(200)}) == 200


# ─── require_identifier ──────────────────────────────────────────

@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_identifier_missing(value):
    with pytest.raises(MissingParameterError) as exc:
        require_identifier(value, "channelId")
    assert exc.value.message == "Missing channelId parameter"


def test_require_identifier_invalid():
    with pytest.raises(InvalidIdentifierError) as exc:
        require_identifier("invalidChannelId", "channelId")
    assert exc.value.message == "Invalid channelId"


def test_require_identifier_strips_and_returns():
    assert require_identifier(
        " 65f1c0de0123456789abcdef ", "channelId",
    ) == "65f1c0de0123456789abcdef"


def test_require_identifier_custom_validator():
    def fixture_ids(value):
        return value in ("validChannelId", "validSubscriberId")

    assert require_identifier(
        "validChannelId", "channelId", fixture_ids,
    ) == "validChannelId"
    with pytest.raises(InvalidIdentifierError):
        require_identifier("invalidChannelId", "channelId", fixture_ids)
