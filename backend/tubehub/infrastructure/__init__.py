"""Infrastructure Layer — database, token verification, logging, repositories.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Implements the protocols declared in core/repository_protocols.py
"""
