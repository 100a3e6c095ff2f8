"""Domain errors package.

Usage:
    from pwdigest.domain.errors import PasswordError, PasswordTooShortError
"""

from pwdigest.domain.errors.password_error import (
    PasswordError,
    PasswordInvalidEncodingError,
    PasswordTooShortError,
)

__all__ = [
    "PasswordError",
    "PasswordInvalidEncodingError",
    "PasswordTooShortError",
]
