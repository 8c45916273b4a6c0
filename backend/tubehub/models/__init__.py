"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Identifiers are 24-hex strings generated by core.identifiers.new_identifier

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from tubehub.models.user import User  # noqa: F401
from tubehub.models.video import Video  # noqa: F401
from tubehub.models.subscription import Subscription  # noqa: F401
from tubehub.models.playlist import Playlist, PlaylistVideo  # noqa: F401
