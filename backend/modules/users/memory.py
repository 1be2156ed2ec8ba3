"""
In-process identity directory.

Keeps accounts in dictionaries for local development and tests. Each
method completes without awaiting, so under a single event loop every
call is atomic with respect to other coroutines and the email index can
never hold two accounts for the same normalized address.
"""

import itertools
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from shared.roles import Role

from .exceptions import account_not_found, duplicate_identity
from .interfaces import IIdentityDirectory
from .models import Account, normalize_email


class InMemoryIdentityDirectory(IIdentityDirectory):
    """Dictionary-backed IIdentityDirectory."""

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._ids_by_email: dict[str, str] = {}
        self._insert_order: dict[str, int] = {}
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._accounts)

    async def create_account(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> Account:
        key = normalize_email(email)
        if key in self._ids_by_email:
            raise duplicate_identity(email)

        now = datetime.now(timezone.utc)
        account = Account(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self._accounts[account.id] = account
        self._ids_by_email[key] = account.id
        self._insert_order[account.id] = next(self._sequence)
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        account_id = self._ids_by_email.get(normalize_email(email))
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def list_page(self, limit: int, offset: int) -> tuple[list[Account], int]:
        ordered = sorted(
            self._accounts.values(),
            key=lambda a: (a.created_at, self._insert_order[a.id]),
            reverse=True,
        )
        return ordered[offset:offset + limit], len(ordered)

    async def delete_by_id(self, account_id: str) -> None:
        account = self._accounts.pop(account_id, None)
        if account is None:
            raise account_not_found(account_id)
        self._ids_by_email.pop(normalize_email(account.email), None)
        self._insert_order.pop(account_id, None)

    async def update_by_id(self, account_id: str, changes: dict[str, Any]) -> Account:
        current = self._accounts.get(account_id)
        if current is None:
            raise account_not_found(account_id)

        old_key = normalize_email(current.email)
        new_key = old_key
        if "email" in changes:
            new_key = normalize_email(changes["email"])
            owner = self._ids_by_email.get(new_key)
            if owner is not None and owner != account_id:
                raise duplicate_identity(changes["email"])

        updated = Account.model_validate(
            {
                **current.model_dump(),
                **changes,
                "password_hash": current.password_hash,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._accounts[account_id] = updated
        if new_key != old_key:
            del self._ids_by_email[old_key]
            self._ids_by_email[new_key] = account_id
        return updated
