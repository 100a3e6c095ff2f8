"""Password domain errors.

Returned inside ``Failure`` by ``Password.create`` and ``Password.from_bytes``.
Two variants exist:

- PasswordTooShortError: input shorter than the minimum length
- PasswordInvalidEncodingError: input is not a valid character sequence

Neither variant carries any part of the rejected input. Encoding errors
report the codec, position and reason only, never the offending bytes.

Usage:
    from pwdigest.domain.errors import PasswordTooShortError

    match Password.create(raw):
        case Failure(error=PasswordTooShortError(actual_length=n)):
            ...
"""

from dataclasses import dataclass

from pwdigest.core.constants import MIN_PASSWORD_LENGTH
from pwdigest.core.enums import ErrorCode
from pwdigest.core.errors import ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordError(ValidationError):
    """Base class for password validation failures.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Always "password".
        details: Additional context (string values only).
    """

    field: str | None = "password"


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordTooShortError(PasswordError):
    """Password has fewer than MIN_PASSWORD_LENGTH characters.

    Attributes:
        actual_length: Measured length of the rejected input.
    """

    actual_length: int

    @classmethod
    def of_length(cls, actual_length: int) -> "PasswordTooShortError":
        """Build the error for an input of the given measured length.

        Args:
            actual_length: Measured length of the rejected input.

        Returns:
            PasswordTooShortError with the canonical message.
        """
        return cls(
            code=ErrorCode.PASSWORD_TOO_SHORT,
            message=(
                f"Password should be at least {MIN_PASSWORD_LENGTH} chars long, "
                f"but was {actual_length}"
            ),
            details={
                "min_length": str(MIN_PASSWORD_LENGTH),
                "actual_length": str(actual_length),
            },
            actual_length=actual_length,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordInvalidEncodingError(PasswordError):
    """Password input is not a valid character sequence.

    Attributes:
        detail: Description of the encoding problem (no input content).
    """

    detail: str

    @classmethod
    def from_unicode_error(cls, error: UnicodeError) -> "PasswordInvalidEncodingError":
        """Build the error from a codec failure.

        Only the codec name, position and reason are kept. The exception's
        own string form quotes the offending bytes and is not used.

        Args:
            error: UnicodeEncodeError or UnicodeDecodeError raised by the codec.

        Returns:
            PasswordInvalidEncodingError with the canonical message.
        """
        encoding = getattr(error, "encoding", "unknown")
        start = getattr(error, "start", None)
        reason = getattr(error, "reason", type(error).__name__)
        position = "unknown position" if start is None else f"position {start}"
        detail = f"invalid {encoding} sequence at {position} ({reason})"
        return cls.with_detail(detail)

    @classmethod
    def with_detail(cls, detail: str) -> "PasswordInvalidEncodingError":
        """Build the error from a detail string.

        Args:
            detail: Description of the encoding problem.

        Returns:
            PasswordInvalidEncodingError with the canonical message.
        """
        return cls(
            code=ErrorCode.PASSWORD_INVALID_ENCODING,
            message=f"Password should be a valid string: {detail}",
            details={"detail": detail},
            detail=detail,
        )
