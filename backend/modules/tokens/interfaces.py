"""
Token module interface.

Other modules should depend on ITokenService, not the concrete implementation.
"""

from datetime import timedelta
from typing import Protocol, Optional, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """Interface for issuing and verifying bearer tokens."""

    def issue(self, account_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
        """
        Issue a signed token for an account.

        Args:
            account_id: Account ID, stored as the ``sub`` claim
            email: Account email
            ttl: Lifetime of the token; defaults to the configured TTL

        Returns:
            Encoded token string
        """
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            BastionError(INVALID_TOKEN): For any malformed, mis-signed
                or expired token
        """
        ...
