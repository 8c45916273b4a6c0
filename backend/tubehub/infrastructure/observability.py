"""Structured Logging — request-context fields on every TubeHub log line.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Context fields (user, channel, playlist, video, resource, error code, path,
      auth failure reason) are emitted only when the call site supplied them
    - setup_logging is idempotent: repeated lifespans never stack handlers

Design Decisions:
    - Plain stdlib logging with `extra=`: call sites stay `logger.info(msg, extra=...)`
    - JSON for deployments, key=value text for local runs and tests
    - SQLAlchemy engine and aiosqlite chatter held at WARNING
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS: tuple[str, ...] = (
    "user_id", "channel_id", "playlist_id", "video_id", "resource_id",
    "error_code", "path", "reason",
)

_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def _context(record: logging.LogRecord) -> dict:
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with the context fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class _TubeHubHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the TubeHub handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _TubeHubHandler)]:
        root.removeHandler(existing)

    handler = _TubeHubHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
