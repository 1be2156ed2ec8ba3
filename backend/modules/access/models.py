"""
Access module data models.
"""

from dataclasses import dataclass
from typing import Optional

from shared.models import AuthenticatedUser
from shared.roles import Role


@dataclass(frozen=True)
class AccessPolicy:
    """
    What a route requires from its caller.

    public: skip every guard (no token needed)
    minimum_role: lowest role allowed; None admits any authenticated caller
    """

    public: bool = False
    minimum_role: Optional[Role] = None


PUBLIC = AccessPolicy(public=True)
AUTHENTICATED = AccessPolicy()
ADMIN_ONLY = AccessPolicy(minimum_role=Role.ADMIN)


@dataclass
class AccessContext:
    """State threaded through the guard checks of one request."""

    policy: AccessPolicy
    token: Optional[str]
    caller: Optional[AuthenticatedUser] = None
