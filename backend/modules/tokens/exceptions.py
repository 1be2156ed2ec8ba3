"""
Token module errors.

Every verification failure produces the same error so the cause
(bad signature, expiry, garbage input) is never revealed.
"""

from shared.exceptions import BastionError, ErrorKind

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def invalid_token() -> BastionError:
    return BastionError(ErrorKind.INVALID_TOKEN, INVALID_TOKEN_MESSAGE)
