"""Centralized constants for internal implementation details.

These are fixed properties of the password contract, NOT environment-specific
configuration. For environment-specific settings, use
`pwdigest/core/config.py` instead.

Example:
    >>> from pwdigest.core.constants import MIN_PASSWORD_LENGTH
    >>> len("abcdefgh".encode("utf-8")) >= MIN_PASSWORD_LENGTH
    True
"""

# =============================================================================
# Password Policy
# =============================================================================

MIN_PASSWORD_LENGTH: int = 8
"""Minimum password length, measured in UTF-8 bytes (one per ASCII character)."""

PASSWORD_ENCODING: str = "utf-8"
"""Codec used to turn password text into bytes before measuring and hashing."""


# =============================================================================
# Digest
# =============================================================================

DIGEST_SIZE_BYTES: int = 8
"""BLAKE2b output size in bytes (8 bytes = 64-bit digest)."""


# =============================================================================
# Display
# =============================================================================

MASKED_PASSWORD: str = "********"
"""Fixed text form of a Password; independent of the input length."""
