"""Pytest configuration.

Ensures every test starts with fresh container singletons and default
structlog configuration, so environment patches and adapter mocks in one
test never leak into another.
"""

import pytest
import structlog

from pwdigest.core.config import get_settings
from pwdigest.core.container import get_digest_service, get_logger


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings, services and logging configuration."""
    get_settings.cache_clear()
    get_digest_service.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_digest_service.cache_clear()
    get_logger.cache_clear()
    structlog.reset_defaults()


class RecordingHasher:
    """Digest stub that records every input it receives."""

    def __init__(self, digest: str = "42") -> None:
        self.calls: list[bytes] = []
        self._digest = digest

    def digest(self, data: bytes) -> str:
        self.calls.append(data)
        return self._digest


@pytest.fixture
def recording_hasher() -> RecordingHasher:
    """Provide a hasher stub for checking what reaches the digest step."""
    return RecordingHasher()
