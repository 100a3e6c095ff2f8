"""Dependency container (composition root).

Application-scoped singletons:
- Password digest (BLAKE2b)
- Logging (console, structlog)

Adapter selection lives here only; the rest of the code depends on the
domain protocols.

Usage:
    from pwdigest.core.container import get_digest_service, get_logger

    hasher = get_digest_service()
    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from pwdigest.core.config import get_settings

if TYPE_CHECKING:
    from pwdigest.domain.protocols.logger_protocol import LoggerProtocol
    from pwdigest.domain.protocols.password_digest_protocol import (
        PasswordDigestProtocol,
    )


@lru_cache()
def get_digest_service() -> "PasswordDigestProtocol":
    """Get password digest service singleton (app-scoped).

    Returns:
        Digest service implementing PasswordDigestProtocol.
    """
    from pwdigest.infrastructure.security.blake2_digest_service import (
        Blake2DigestService,
    )

    return Blake2DigestService()


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter configuration by environment:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from pwdigest.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.effective_log_level)
