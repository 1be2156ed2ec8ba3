"""
Shared infrastructure for Bastion backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: The tagged BastionError type
- roles: Role enum and the rank table
- logging_config: Root logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import BastionError, ErrorKind
from .models import AuthenticatedUser
from .roles import Role, ROLE_RANK, rank
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "BastionError",
    "ErrorKind",
    "AuthenticatedUser",
    "Role",
    "ROLE_RANK",
    "rank",
    "configure_logging",
]
