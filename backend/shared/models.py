"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field

from .roles import Role


class AuthenticatedUser(BaseModel):
    """
    The caller of a request, as resolved by the authentication guard.

    The id and email come from the verified token; the role is read from
    the identity directory so that role changes take effect immediately.
    """

    id: str = Field(..., description="Account ID")
    email: str = Field(..., description="Account email address")
    role: Role = Field(default=Role.USER, description="Account role")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
