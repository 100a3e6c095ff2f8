"""BLAKE2b password digest service (adapter).

Implements PasswordDigestProtocol with an unkeyed, unsalted BLAKE2b hash
truncated to 64 bits and rendered as a decimal string.

Architecture:
    - Implements PasswordDigestProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Deterministic: same input, same digest, in every process
    - Fast and unsalted, so NOT suitable for real credential storage;
      a production system would use a slow salted hash (bcrypt/argon2)
"""

import hashlib

from pwdigest.core.constants import DIGEST_SIZE_BYTES


class Blake2DigestService:
    """Deterministic 64-bit BLAKE2b digest rendered as decimal text.

    Usage:
        from pwdigest.core.container import get_digest_service

        hasher = get_digest_service()
        digest = hasher.digest(b"abcdefgh")  # decimal string
    """

    def digest(self, data: bytes) -> str:
        """Hash password bytes into a decimal digest string.

        Args:
            data: Encoded password bytes.

        Returns:
            Canonical decimal form of the big-endian hash value
            (no leading zeros, at least one digit).

        Example:
            >>> service = Blake2DigestService()
            >>> service.digest(b"abcdefgh") == service.digest(b"abcdefgh")
            True
        """
        raw_digest = hashlib.blake2b(data, digest_size=DIGEST_SIZE_BYTES).digest()
        return str(int.from_bytes(raw_digest, "big"))
