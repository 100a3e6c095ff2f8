"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from pwdigest.domain.protocols import LoggerProtocol, PasswordDigestProtocol
"""

from pwdigest.domain.protocols.logger_protocol import LoggerProtocol
from pwdigest.domain.protocols.password_digest_protocol import PasswordDigestProtocol

__all__ = [
    "LoggerProtocol",
    "PasswordDigestProtocol",
]
