"""API Dependencies — auth gate and service wiring for route handlers.

Invariants:
    - verify_jwt either returns the authenticated user id or raises AuthenticationError
      BEFORE the route handler runs (401 {"message": "Invalid JWT"})
    - The token subject must be a well-formed identifier before it reaches a handler
    - Authenticated user id stored on request.state.user_id
    - Services receive request-scoped repositories; no module-level clients

Design Decisions:
    - Auth as a FastAPI dependency over BaseHTTPMiddleware: attaches per router,
      so the subscription surface can opt out via settings
    - TokenVerifier resolved through get_token_verifier: tests override it through
      app.dependency_overrides instead of patching globals
"""

import logging

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tubehub.config import Settings, get_settings
from tubehub.core.domain_types import UserId
from tubehub.core.errors import AuthenticationError
from tubehub.core.identifiers import is_valid_identifier
from tubehub.core.repository_protocols import TokenVerifier
from tubehub.infrastructure.database import get_db
from tubehub.infrastructure.jwt_verifier import JWTTokenVerifier
from tubehub.infrastructure.repositories import (
    SqlPlaylistRepository,
    SqlSubscriptionRepository,
    SqlUserRepository,
    SqlVideoRepository,
)
from tubehub.services.playlist_service import PlaylistService
from tubehub.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)


# ─── Auth ────────────────────────────────────────────────────────

def get_token_verifier(
    settings: Settings = Depends(get_settings),
) -> TokenVerifier:
    return JWTTokenVerifier(settings.jwt_secret, settings.jwt_algorithm)


def extract_bearer_token(authorization: str | None) -> str:
    """Pull the token out of an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise AuthenticationError("missing")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("malformed")
    return token.strip()


async def verify_jwt(
    request: Request,
    authorization: str | None = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> UserId:
    """Auth gate — halts the request unless the bearer token verifies."""
    try:
        user_id = verifier.verify(extract_bearer_token(authorization))
        if not is_valid_identifier(user_id):
            raise AuthenticationError("invalid_subject")
    except AuthenticationError as e:
        logger.warning(
            "JWT verification failed",
            extra={"path": request.url.path, "reason": e.reason},
        )
        raise
    request.state.user_id = user_id
    return user_id


async def verify_jwt_if_required(
    request: Request,
    authorization: str | None = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
    settings: Settings = Depends(get_settings),
) -> UserId | None:
    """Auth gate controlled by settings.subscription_auth_required."""
    if not settings.subscription_auth_required:
        return None
    return await verify_jwt(request, authorization, verifier)


# ─── Services ────────────────────────────────────────────────────

def get_subscription_service(
    db: AsyncSession = Depends(get_db),
) -> SubscriptionService:
    return SubscriptionService(
        SqlSubscriptionRepository(db), SqlUserRepository(db),
    )


def get_playlist_service(
    db: AsyncSession = Depends(get_db),
) -> PlaylistService:
    return PlaylistService(
        SqlPlaylistRepository(db),
        SqlVideoRepository(db),
        SqlUserRepository(db),
    )
