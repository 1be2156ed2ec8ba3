"""
Authentication module data models.
"""

from pydantic import BaseModel, Field

from modules.users.models import Account


class AuthResult(BaseModel):
    """An account together with a freshly issued bearer token."""

    account: Account = Field(..., description="The signed-up or signed-in account")
    token: str = Field(..., description="Signed bearer token")

    model_config = {"frozen": True}
