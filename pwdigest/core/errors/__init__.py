"""Core errors package.

Usage:
    from pwdigest.core.errors import DomainError, ValidationError
"""

from pwdigest.core.errors.common_errors import ValidationError
from pwdigest.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]
