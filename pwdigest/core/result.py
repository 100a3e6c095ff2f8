"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising, so the failure
path is part of the signature and callers handle it explicitly.

Usage:
    from pwdigest.core.result import Failure, Success
    from pwdigest.domain.value_objects import Password

    match Password.create(raw):
        case Success(value=password):
            print(repr(password))
        case Failure(error=error):
            print(error.message)

Note:
    Both classes are keyword-only dataclasses, so ``match`` patterns must use
    keyword form (``Success(value=...)``), not positional form.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
