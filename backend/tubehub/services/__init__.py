"""Services Layer — request handlers for subscriptions and playlists.

Invariants:
    - Handlers receive repositories through their constructors (no global imports)
    - Handlers raise TubeHubError subclasses; the API layer renders them

Design Decisions:
    - One handler class per resource for locality
"""
