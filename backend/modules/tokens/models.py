"""
Token module data models.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Verified claims carried by a bearer token.

    Claims stay minimal: the account id and email. The role is not part
    of the token and is resolved from the identity directory per request.
    """

    sub: str = Field(..., min_length=1, description="Subject (account ID)")
    email: str = Field(..., description="Account email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def account_id(self) -> str:
        return self.sub

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)
