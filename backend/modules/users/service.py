"""
Account policy service.

Enforces the mutation rules for identities before handing the actual
write to the identity directory. The order of checks is part of the
contract, so callers get a deterministic error when several rules fail:

delete: existence -> self-deletion -> admin role
update: existence -> ownership or admin -> role-change authority -> email uniqueness
"""

import logging
from typing import Optional

from shared.exceptions import BastionError, ErrorKind
from shared.roles import Role
from modules.pagination.models import Page
from modules.pagination.service import DEFAULT_LIMIT, offset_for, paginate

from .exceptions import (
    account_not_found,
    email_in_use,
    insufficient_permissions,
    self_deletion,
    unauthorized_update,
)
from .interfaces import IIdentityDirectory, IUserService
from .models import Account, AccountPatch, normalize_email

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Implementation of the account policy checks.

    Holds no state besides the directory reference; concurrent requests
    are serialized only by the directory itself.
    """

    def __init__(self, directory: IIdentityDirectory):
        self._directory = directory

    async def get_account(self, account_id: str) -> Account:
        account = await self._directory.find_by_id(account_id)
        if account is None:
            raise account_not_found(account_id)
        return account

    async def list_accounts(self, limit: int = DEFAULT_LIMIT, page: int = 1) -> Page[Account]:
        items, total = await self._directory.list_page(limit, offset_for(limit, page))
        return paginate(items, total, limit, page)

    async def delete_account(
        self,
        requesting_id: str,
        target_id: str,
        requesting_role: Role,
    ) -> None:
        """
        Delete the target account.

        A second concurrent delete of the same target sees it absent and
        fails with NOT_FOUND, either here or from the directory.
        """
        await self.get_account(target_id)

        if requesting_id == target_id:
            logger.info("Account %s attempted to delete itself", requesting_id)
            raise self_deletion()

        if Role(requesting_role) != Role.ADMIN:
            logger.info("Account %s lacks permission to delete %s", requesting_id, target_id)
            raise insufficient_permissions()

        await self._directory.delete_by_id(target_id)
        logger.info("Account %s deleted by %s", target_id, requesting_id)

    async def update_account(
        self,
        requesting_id: str,
        target_id: str,
        patch: AccountPatch,
        requesting_role: Role,
    ) -> Account:
        target = await self.get_account(target_id)
        is_admin = Role(requesting_role) == Role.ADMIN

        if requesting_id != target_id and not is_admin:
            logger.info("Account %s may not update %s", requesting_id, target_id)
            raise unauthorized_update()

        if patch.role is not None and patch.role != target.role and not is_admin:
            logger.info("Account %s may not change roles", requesting_id)
            raise unauthorized_update()

        new_email: Optional[str] = None
        if patch.email is not None and normalize_email(patch.email) != normalize_email(target.email):
            new_email = patch.email
            holder = await self._directory.find_by_email(new_email)
            if holder is not None and holder.id != target_id:
                raise email_in_use(new_email)

        changes = patch.changes()
        if not changes:
            return target

        try:
            return await self._directory.update_by_id(target_id, changes)
        except BastionError as e:
            # Lost a race with another writer claiming the same email.
            if e.kind == ErrorKind.DUPLICATE_IDENTITY:
                raise email_in_use(new_email or patch.email or "") from None
            raise
