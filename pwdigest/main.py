"""
Demonstration entry point.

Hashes one password and prints the debug representation of the result.
Only the digest is ever printed or logged; the plaintext is not.

Usage:
    pwdigest                    # hashes the configured demo password
    pwdigest "some passphrase"  # hashes the given password
"""

import sys

from pwdigest.core.config import get_settings
from pwdigest.core.container import get_logger
from pwdigest.core.result import Failure, Success
from pwdigest.domain.value_objects import Password


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration.

    Args:
        argv: Command-line arguments without the program name. The first
            argument, if present, is the password to hash.

    Returns:
        int: 0 if the password was accepted, 1 if it was rejected.
    """
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    logger = get_logger().bind(app=settings.app_name, version=settings.app_version)

    raw = args[0] if args else settings.demo_password.get_secret_value()

    match Password.create(raw):
        case Success(value=password):
            logger.info("password_accepted", digest_length=len(password.digest))
            print(repr(password))
            return 0
        case Failure(error=error):
            logger.warning(
                "password_rejected",
                error_code=error.code.value,
                details=error.details,
            )
            print(error.message, file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
