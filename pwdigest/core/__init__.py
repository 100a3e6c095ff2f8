"""Core shared kernel.

Foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Error codes and environment enums

The core module has NO dependencies on other application layers.
"""

from pwdigest.core.enums import ErrorCode
from pwdigest.core.errors import DomainError, ValidationError
from pwdigest.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
