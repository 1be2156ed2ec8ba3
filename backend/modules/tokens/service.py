"""
Token service implementation.

Signs and verifies HS256 (or HS384/HS512) JWTs with a secret that is
handed in at construction time. The service holds no mutable state, so a
single instance is shared by every request.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError

from shared.config import Settings

from .exceptions import invalid_token
from .interfaces import ITokenService
from .models import TokenClaims

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class TokenService(ITokenService):
    """
    Stateless JWT issuer and verifier.

    There is no revocation list; a token stops being valid only when its
    embedded expiry passes.
    """

    def __init__(self, secret: str, ttl: timedelta, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret.get_secret_value(),
            ttl=settings.jwt_expires_in,
            algorithm=settings.jwt_algorithm,
        )

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, account_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
        """Issue a signed token with expiry = now + ttl."""
        now = datetime.now(timezone.utc)
        expire = now + (self._ttl if ttl is None else ttl)
        payload = {
            "sub": str(account_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Malformed input, a bad signature, a wrong algorithm and expiry all
        raise the same INVALID_TOKEN error.
        """
        if not token or not isinstance(token, str):
            raise invalid_token()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return TokenClaims(**payload)
        except (jwt.PyJWTError, ValidationError) as e:
            logger.debug("Token rejected: %s", type(e).__name__)
            raise invalid_token() from None

