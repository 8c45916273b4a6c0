"""SQLAlchemy Repositories — shell implementations of core/repository_protocols.py.

Invariants:
    - Every method takes/returns plain values and dicts, never ORM objects
    - Write methods commit; the request-scoped session manager rolls back on failure
"""

from tubehub.infrastructure.repositories.subscriptions import SqlSubscriptionRepository  # noqa: F401
from tubehub.infrastructure.repositories.playlists import SqlPlaylistRepository  # noqa: F401
from tubehub.infrastructure.repositories.lookups import (  # noqa: F401
    SqlUserRepository, SqlVideoRepository,
)
