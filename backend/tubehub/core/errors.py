"""Error Hierarchy — typed, categorized exceptions for all TubeHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() renders the envelope the raising surface expects
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TubeHubError base: FastAPI global handler catches all
    - Envelope chosen per error class: identifier errors come from the subscription
      surface ({"status": "error", ...}); everything else from the playlist surface
      ({"message": ...}). Callers may override per instance.
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from tubehub.core.domain_types import ResponseEnvelope


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_id: str | None = None


class TubeHubError(Exception):
    """Base exception for all TubeHub errors."""

    envelope: ResponseEnvelope = ResponseEnvelope.PLAIN

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        envelope: ResponseEnvelope | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        if envelope is not None:
            self.envelope = envelope

    def to_response(self) -> dict:
        """Convert to the REST error body for this error's surface."""
        if self.envelope == ResponseEnvelope.STATUS:
            return {"status": "error", "message": self.message}
        return {"message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingParameterError(TubeHubError):
    """Required path or body parameter absent."""
    envelope = ResponseEnvelope.STATUS

    def __init__(self, parameter: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing {parameter} parameter",
            "MISSING_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.parameter = parameter


class InvalidIdentifierError(TubeHubError):
    """Identifier present but malformed."""
    envelope = ResponseEnvelope.STATUS

    def __init__(self, parameter: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid {parameter}",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.parameter = parameter


class ValidationError(TubeHubError):
    """Request field failed a domain rule (e.g. empty playlist name)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class AuthenticationError(TubeHubError):
    """Bearer token missing, malformed, expired or badly signed."""
    def __init__(self, reason: str = "invalid", context: ErrorContext | None = None):
        super().__init__(
            "Invalid JWT", "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


class PermissionDeniedError(TubeHubError):
    """Authenticated user may not act on the resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PERMISSION_DENIED", ErrorCategory.PERMISSION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(TubeHubError):
    """Well-formed (or unusable) identifier with no matching record."""
    def __init__(
        self, resource_type: str, resource_id: str | None = None,
        context: ErrorContext | None = None,
        envelope: ResponseEnvelope | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404, envelope,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(TubeHubError):
    """Write lost a race against a concurrent request on the same record."""
    def __init__(
        self, message: str, context: ErrorContext | None = None,
        envelope: ResponseEnvelope | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, envelope,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TubeHubError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
