"""
User request/response models.

Responses are built from Account models and never carry a password hash.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from modules.pagination.models import PageMeta
from modules.users.models import Account, AccountPatch
from shared.roles import Role


class UserResponse(BaseModel):
    """Public view of an account."""

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "UserResponse":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class UserListResponse(BaseModel):
    """One page of accounts."""

    data: list[UserResponse]
    meta: PageMeta


class UpdateUserRequest(BaseModel):
    """Fields a caller may change; omitted fields stay as they are."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[Role] = None

    def to_patch(self) -> AccountPatch:
        return AccountPatch(name=self.name, email=self.email, role=self.role)
