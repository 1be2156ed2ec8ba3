"""
Authentication module.

Handles signup and signin: duplicate-email checks, argon2 password
hashing, and token issuance through the token module.

Public API:
- ICredentialService: Interface for signup/signin
- CredentialService: Implementation
- PasswordService: Argon2id hashing
- AuthResult: Account plus token
"""

from .interfaces import ICredentialService
from .models import AuthResult
from .passwords import PasswordService
from .service import CredentialService
from .exceptions import invalid_credentials, INVALID_CREDENTIALS_MESSAGE

__all__ = [
    # Interface
    "ICredentialService",
    # Models
    "AuthResult",
    # Implementations
    "CredentialService",
    "PasswordService",
    # Errors
    "invalid_credentials",
    "INVALID_CREDENTIALS_MESSAGE",
]
