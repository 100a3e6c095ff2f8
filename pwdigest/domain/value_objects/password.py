"""Password value object holding only a digest.

Immutable value object created through a validating factory. The plaintext
is measured, encoded and hashed inside the factory and never stored.

Architecture:
    - Factory returns Result types (railway-oriented programming)
    - Digest computation delegated to PasswordDigestProtocol
    - No logging, no printing, no I/O
"""

from dataclasses import dataclass

from pwdigest.core.constants import (
    MASKED_PASSWORD,
    MIN_PASSWORD_LENGTH,
    PASSWORD_ENCODING,
)
from pwdigest.core.result import Failure, Result, Success
from pwdigest.domain.errors import (
    PasswordError,
    PasswordInvalidEncodingError,
    PasswordTooShortError,
)
from pwdigest.domain.protocols.password_digest_protocol import PasswordDigestProtocol


@dataclass(frozen=True, slots=True)
class Password:
    """Validated, hashed password.

    Holds a single field: the decimal digest of the input. The original
    characters are never retained, so no attribute, ``str`` or ``repr`` of a
    Password can reveal them.

    Use Password.create() (or Password.from_bytes()) to build one from a
    plaintext. Direct construction only checks the digest shape.

    Password Requirements:
        - At least 8 characters (measured as UTF-8 bytes)
        - Encodable as UTF-8 (no lone surrogates)

    Attributes:
        digest: Decimal digest of the validated input.

    Example:
        >>> Password.create("abcdefgh").value.digest.isdigit()
        True
        >>> Password.create("abcdefg").error.actual_length
        7
    """

    digest: str

    def __post_init__(self) -> None:
        """Validate the digest shape after initialization.

        Raises:
            ValueError: If digest is not a non-empty decimal string.
        """
        if not isinstance(self.digest, str) or not self.digest:
            raise ValueError("Password digest must be a non-empty string")

        if not (self.digest.isascii() and self.digest.isdigit()):
            raise ValueError("Password digest must be a decimal string")

    @classmethod
    def create(
        cls,
        raw: str,
        *,
        hasher: PasswordDigestProtocol | None = None,
    ) -> Result["Password", PasswordError]:
        """Validate and hash a plaintext password.

        Args:
            raw: Plaintext password, any length and content.
            hasher: Digest implementation. Defaults to the container's
                digest service.

        Returns:
            Success(Password) if the input is valid.
            Failure(PasswordInvalidEncodingError) if the text cannot be
                encoded (checked first, since length is measured in bytes).
            Failure(PasswordTooShortError) if shorter than 8 characters.
        """
        try:
            encoded = raw.encode(PASSWORD_ENCODING)
        except UnicodeEncodeError as e:
            return Failure(error=PasswordInvalidEncodingError.from_unicode_error(e))

        return cls._from_encoded(encoded, hasher)

    @classmethod
    def from_bytes(
        cls,
        raw: bytes,
        *,
        hasher: PasswordDigestProtocol | None = None,
    ) -> Result["Password", PasswordError]:
        """Validate and hash a password received as a byte buffer.

        The bytes must decode as UTF-8; after that the rules are exactly
        those of create().

        Args:
            raw: Encoded plaintext password.
            hasher: Digest implementation. Defaults to the container's
                digest service.

        Returns:
            Success(Password) if the input is valid.
            Failure(PasswordInvalidEncodingError) if the bytes do not decode.
            Failure(PasswordTooShortError) if shorter than 8 characters.
        """
        try:
            raw.decode(PASSWORD_ENCODING)
        except UnicodeDecodeError as e:
            return Failure(error=PasswordInvalidEncodingError.from_unicode_error(e))

        return cls._from_encoded(bytes(raw), hasher)

    @classmethod
    def _from_encoded(
        cls,
        encoded: bytes,
        hasher: PasswordDigestProtocol | None,
    ) -> Result["Password", PasswordError]:
        actual_length = len(encoded)
        if actual_length < MIN_PASSWORD_LENGTH:
            return Failure(error=PasswordTooShortError.of_length(actual_length))

        if hasher is None:
            # Resolved from the composition root at call time
            from pwdigest.core.container import get_digest_service

            hasher = get_digest_service()

        return Success(value=cls(digest=hasher.digest(encoded)))

    def __str__(self) -> str:
        """Return a fixed mask.

        Returns:
            str: MASKED_PASSWORD, independent of input and digest.
        """
        return MASKED_PASSWORD
