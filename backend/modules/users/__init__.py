"""
Users module.

Account storage contract, directory implementations, and the policy
checks that govern deleting and updating accounts.

Public API:
- IIdentityDirectory: Storage contract for accounts
- IUserService: Account lookup and mutation interface
- UserService: Policy-enforcing implementation
- InMemoryIdentityDirectory / SupabaseIdentityDirectory: Directory backends
- Account, AccountPatch: Models
"""

from .interfaces import IIdentityDirectory, IUserService
from .models import Account, AccountPatch, normalize_email
from .memory import InMemoryIdentityDirectory
from .repository import SupabaseIdentityDirectory
from .service import UserService

__all__ = [
    # Interfaces
    "IIdentityDirectory",
    "IUserService",
    # Models
    "Account",
    "AccountPatch",
    "normalize_email",
    # Implementations
    "InMemoryIdentityDirectory",
    "SupabaseIdentityDirectory",
    "UserService",
]
