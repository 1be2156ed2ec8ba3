"""
Supabase identity directory.

Encapsulates all Supabase queries and row mapping for the accounts table.
Email uniqueness is enforced by the table's UNIQUE constraint on a citext
column (see migrations/001_create_accounts.sql); a violation surfaces as
PostgreSQL error 23505 and is reported as DUPLICATE_IDENTITY.

Note: This repository does NOT perform authorization checks.
The service layer is responsible for policy decisions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import AsyncClient

from shared.repository import BaseRepository
from shared.roles import Role

from .exceptions import account_not_found, duplicate_identity
from .interfaces import IIdentityDirectory
from .models import Account

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"  # e.g. a non-UUID id
RANGE_NOT_SATISFIABLE = "PGRST103"

ACCOUNT_COLUMNS = "id, name, email, password_hash, role, created_at, updated_at"


class SupabaseIdentityDirectory(BaseRepository[Account], IIdentityDirectory):
    """
    Repository for account data access.

    All methods return Account models mapped from database rows.
    """

    def __init__(self, db: AsyncClient, table: str = "accounts") -> None:
        super().__init__(db, table)

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    async def create_account(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> Account:
        data = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "role": Role(role).value,
        }
        try:
            result = await self._query().insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.info("Unique constraint rejected account insert")
                raise duplicate_identity(email) from None
            raise
        return self._map_to_account(result.data[0])

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    async def find_by_email(self, email: str) -> Optional[Account]:
        result = await self._query().select(ACCOUNT_COLUMNS).eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        try:
            result = await self._query().select(ACCOUNT_COLUMNS).eq("id", account_id).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    async def list_page(self, limit: int, offset: int) -> tuple[list[Account], int]:
        """
        List accounts newest first.

        PostgREST answers a range past the last row with PGRST103; that is
        an empty page, not an error, so the total is fetched separately.
        """
        try:
            result = await (
                self._query()
                .select(ACCOUNT_COLUMNS, count="exact")
                .order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        except APIError as e:
            if e.code != RANGE_NOT_SATISFIABLE:
                raise
            return [], await self._count()

        accounts = [self._map_to_account(row) for row in result.data]
        return accounts, result.count or 0

    async def _count(self) -> int:
        result = await self._query().select("id", count="exact").limit(1).execute()
        return result.count or 0

    # -------------------------------------------------------------------------
    # Update / delete
    # -------------------------------------------------------------------------

    async def update_by_id(self, account_id: str, changes: dict[str, Any]) -> Account:
        data = {
            **changes,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            result = await self._query().update(data).eq("id", account_id).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise duplicate_identity(changes.get("email", "")) from None
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise account_not_found(account_id) from None
            raise
        if not result.data:
            raise account_not_found(account_id)
        return self._map_to_account(result.data[0])

    async def delete_by_id(self, account_id: str) -> None:
        try:
            result = await self._query().delete().eq("id", account_id).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise account_not_found(account_id) from None
            raise
        if not result.data:
            raise account_not_found(account_id)

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _map_to_account(row: dict[str, Any]) -> Account:
        return Account(
            id=str(row["id"]),
            name=row["name"],
            email=row["email"],
            password_hash=row.get("password_hash") or "",
            role=Role(row["role"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
