"""Password digest protocol for domain layer.

Defines the interface the Password value object uses to turn validated
password bytes into a textual digest. Infrastructure provides the concrete
implementation (Blake2DigestService).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (Blake2DigestService)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordDigestProtocol(Protocol):
    """Deterministic password digest interface.

    Implementations:
        - Blake2DigestService: unkeyed 64-bit BLAKE2b, decimal output

    Usage:
        def __init__(self, hasher: PasswordDigestProtocol):
            self.hasher = hasher

        digest = self.hasher.digest(b"correct horse battery staple")
    """

    def digest(self, data: bytes) -> str:
        """Compute the digest of password bytes.

        Args:
            data: Encoded password bytes.

        Returns:
            Non-empty digest string.

        Note:
            - Same input MUST produce the same output (no salt)
            - MUST NOT log or retain the input
        """
        ...
