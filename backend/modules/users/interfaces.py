"""
Users module interfaces.

IIdentityDirectory is the storage collaborator for accounts. The core
never talks to a database directly; it only calls these methods.
IUserService is the account policy surface used by the API layer.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from shared.roles import Role
from modules.pagination.models import Page

from .models import Account, AccountPatch


@runtime_checkable
class IIdentityDirectory(Protocol):
    """
    Persistence contract for accounts.

    Implementations must enforce email uniqueness themselves (not only
    rely on callers checking first) and report a conflict as
    BastionError(DUPLICATE_IDENTITY).
    """

    async def create_account(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> Account:
        """
        Store a new account.

        Raises:
            BastionError(DUPLICATE_IDENTITY): If the email is taken
        """
        ...

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Return the account with this email (case-insensitive), or None."""
        ...

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """Return the account with this ID, or None."""
        ...

    async def list_page(self, limit: int, offset: int) -> tuple[list[Account], int]:
        """
        Return one slice of accounts, newest first, and the total count.
        """
        ...

    async def delete_by_id(self, account_id: str) -> None:
        """
        Remove an account.

        Raises:
            BastionError(NOT_FOUND): If no such account exists
        """
        ...

    async def update_by_id(self, account_id: str, changes: dict[str, Any]) -> Account:
        """
        Apply field changes and return the updated account.

        Raises:
            BastionError(NOT_FOUND): If no such account exists
            BastionError(DUPLICATE_IDENTITY): If a new email is taken
        """
        ...


@runtime_checkable
class IUserService(Protocol):
    """Interface for account lookup and mutation under policy checks."""

    async def get_account(self, account_id: str) -> Account:
        """
        Get an account by ID.

        Raises:
            BastionError(NOT_FOUND): If absent
        """
        ...

    async def list_accounts(self, limit: int = 10, page: int = 1) -> Page[Account]:
        """List accounts newest first with page metadata."""
        ...

    async def delete_account(
        self,
        requesting_id: str,
        target_id: str,
        requesting_role: Role,
    ) -> None:
        """
        Delete an account.

        Raises:
            BastionError(NOT_FOUND | SELF_DELETION | INSUFFICIENT_PERMISSIONS)
        """
        ...

    async def update_account(
        self,
        requesting_id: str,
        target_id: str,
        patch: AccountPatch,
        requesting_role: Role,
    ) -> Account:
        """
        Update an account.

        Raises:
            BastionError(NOT_FOUND | UNAUTHORIZED_UPDATE | EMAIL_IN_USE)
        """
        ...
