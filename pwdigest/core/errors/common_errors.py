"""Common error classes shared across the domain.

Usage:
    from pwdigest.core.errors import ValidationError
    from pwdigest.core.enums import ErrorCode
    from pwdigest.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORD_TOO_SHORT,
        message="Password should be at least 8 chars long, but was 3",
        field="password",
    ))
"""

from dataclasses import dataclass

from pwdigest.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
