"""Core enums package.

Usage:
    from pwdigest.core.enums import ErrorCode, Environment
"""

from pwdigest.core.enums.environment import Environment
from pwdigest.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
