"""Security infrastructure adapters.

- Password digest (BLAKE2b, 64-bit, decimal)
"""

from pwdigest.infrastructure.security.blake2_digest_service import Blake2DigestService

__all__ = [
    "Blake2DigestService",
]
