"""
Users module errors.

Constructors for the BastionError kinds raised by the identity directory
and by the account policy checks.
"""

from shared.exceptions import BastionError, ErrorKind


def account_not_found(account_id: str) -> BastionError:
    return BastionError(
        ErrorKind.NOT_FOUND,
        f"User with ID {account_id} not found",
        details={"account_id": account_id},
    )


def duplicate_identity(email: str) -> BastionError:
    return BastionError(
        ErrorKind.DUPLICATE_IDENTITY,
        "Email already in use",
        details={"email": email},
    )


def self_deletion() -> BastionError:
    return BastionError(ErrorKind.SELF_DELETION, "You cannot delete yourself")


def insufficient_permissions() -> BastionError:
    return BastionError(
        ErrorKind.INSUFFICIENT_PERMISSIONS,
        "You do not have permission to delete users",
    )


def unauthorized_update() -> BastionError:
    return BastionError(
        ErrorKind.UNAUTHORIZED_UPDATE,
        "You are not authorized to update this user",
    )


def email_in_use(email: str) -> BastionError:
    return BastionError(
        ErrorKind.EMAIL_IN_USE,
        f"Email {email} is already in use",
        details={"email": email},
    )
