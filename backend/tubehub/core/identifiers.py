"""Identifier Validation — format predicate and generator for entity identifiers.

Invariants:
    - is_valid_identifier is a FORMAT check only: never consults storage
    - require_identifier raises before any storage access
    - new_identifier() output always satisfies is_valid_identifier

Design Decisions:
    - Object-id style identifiers (24 hex chars): 8 hex digits of creation time
      + 16 random hex digits, so ids sort roughly by creation order
    - IdentifierValidator is a plain callable: handlers take it as a constructor
      argument, deployments swap the format rule without subclassing
"""

import re
import secrets
import time
from typing import Callable

from tubehub.core.errors import InvalidIdentifierError, MissingParameterError

IDENTIFIER_LENGTH: int = 24
_IDENTIFIER_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

IdentifierValidator = Callable[[str], bool]


def is_valid_identifier(value: object) -> bool:
    """True iff value is a 24-character hex string."""
    if not isinstance(value, str):
        return False
    return bool(_IDENTIFIER_PATTERN.match(value))


def new_identifier() -> str:
    """Generate a fresh identifier (timestamp prefix + random suffix)."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def require_identifier(
    value: str | None,
    parameter: str,
    validator: IdentifierValidator = is_valid_identifier,
) -> str:
    """Return the stripped identifier or raise MissingParameter/InvalidIdentifier."""
    if value is None or not str(value).strip():
        raise MissingParameterError(parameter)
    value = str(value).strip()
    if not validator(value):
        raise InvalidIdentifierError(parameter)
    return value
