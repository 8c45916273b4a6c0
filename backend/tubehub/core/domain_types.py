"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ChannelId, PlaylistId, VideoId wrap identifier strings
    - A channel is a user: ChannelId and SubscriberId are both user identifiers
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ChannelId = NewType("ChannelId", str)
SubscriberId = NewType("SubscriberId", str)
PlaylistId = NewType("PlaylistId", str)
VideoId = NewType("VideoId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ToggleAction(str, Enum):
    """Outcome of a subscription toggle — what the shell must persist."""
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"


class ResponseEnvelope(str, Enum):
    """Error body shape used by a route surface.

    STATUS → {"status": "error", "message": ...}
    PLAIN  → {"message": ...}
    """
    STATUS = "status"
    PLAIN = "plain"
