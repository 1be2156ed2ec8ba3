"""
Authentication module errors.

Unknown email and wrong password share one message so a caller cannot
tell which accounts exist.
"""

from shared.exceptions import BastionError, ErrorKind
from modules.users.exceptions import duplicate_identity

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials provided"


def invalid_credentials() -> BastionError:
    return BastionError(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)


__all__ = ["invalid_credentials", "duplicate_identity", "INVALID_CREDENTIALS_MESSAGE"]
