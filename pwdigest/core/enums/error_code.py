"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Password errors
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_INVALID_ENCODING = "password_invalid_encoding"
