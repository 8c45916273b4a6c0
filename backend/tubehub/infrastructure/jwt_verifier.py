"""JWT Verification — PyJWT-backed TokenVerifier and token issuing.

Invariants:
    - verify() returns the `sub` claim or raises AuthenticationError, nothing else
    - Expiry (`exp`) and signature always checked; algorithm pinned from settings
    - `sub` must be a non-empty string

Design Decisions:
    - HS256 shared secret from settings: single service issues and verifies
    - issue_token lives beside verify so both sides agree on claim layout
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from tubehub.core.domain_types import UserId
from tubehub.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


class JWTTokenVerifier:
    """Verify bearer tokens signed with the configured secret."""

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def verify(self, token: str) -> UserId:
        try:
            claims = jwt.decode(
                token, self.secret, algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"JWT rejected: {e}")
            raise AuthenticationError("invalid")

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise AuthenticationError("missing_subject")
        return UserId(subject)


def issue_token(
    user_id: str,
    secret: str,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(minutes=60),
) -> str:
    """Mint a signed access token for user_id."""
    now = datetime.now(timezone.utc)
    payload = {"sub": user_id, "iat": now, "exp": now + expires_in}
    return jwt.encode(payload, secret, algorithm=algorithm)
