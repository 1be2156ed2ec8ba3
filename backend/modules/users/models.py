"""
Users module data models.

Account is the stored identity record. Its password hash is excluded from
serialization so it never leaves the process through model_dump/JSON.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from shared.roles import Role


class Account(BaseModel):
    """A registered identity."""

    id: str = Field(..., description="Account ID (UUID)")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address (unique, case-insensitive)")
    password_hash: str = Field(default="", exclude=True, repr=False)
    role: Role = Field(default=Role.USER, description="Account role")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")

    model_config = {"frozen": True}


class AccountPatch(BaseModel):
    """
    Partial update of an account.

    A field left as None is not changed.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[Role] = None

    def changes(self) -> dict[str, Any]:
        """Fields to write, with enums reduced to their stored values."""
        return self.model_dump(exclude_none=True, mode="json")

    def is_empty(self) -> bool:
        return not self.changes()


def normalize_email(email: str) -> str:
    """Key used for email uniqueness comparisons."""
    return email.strip().casefold()
