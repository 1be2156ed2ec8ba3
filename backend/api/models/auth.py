"""
Signup/signin request and response models.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from modules.auth.models import AuthResult
from shared.roles import Role

PASSWORD_MIN_LEN = 4
PASSWORD_MAX_LEN = 20


class SignInRequest(BaseModel):
    """Credentials for signin."""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password (4-20 characters)",
    )


class SignUpRequest(SignInRequest):
    """Registration data."""

    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    role: Role = Field(default=Role.USER, description="Account role")


class AuthResponse(BaseModel):
    """Account summary plus bearer token, returned by signup and signin."""

    id: str
    name: str
    email: str
    role: Role
    token: str
    token_type: str = "bearer"
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        account = result.account
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            role=account.role,
            token=result.token,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
