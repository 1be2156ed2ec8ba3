"""
Token module.

Issues and verifies signed, stateless bearer tokens (JWT).

Public API:
- ITokenService: Interface for token operations
- TokenService: HMAC-signed JWT implementation
- TokenClaims: Verified claims carried by a token
"""

from .interfaces import ITokenService
from .models import TokenClaims
from .service import TokenService

__all__ = [
    "ITokenService",
    "TokenClaims",
    "TokenService",
]
