"""
Account roles and their rank order.

ROLE_RANK is the single source of truth for comparing roles. Both the
authorization guards and the user policy checks read from it.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Role(str, Enum):
    """Closed set of account roles."""

    ADMIN = "admin"
    USER = "user"


ROLE_RANK: Mapping[Role, int] = MappingProxyType(
    {
        Role.ADMIN: 2,
        Role.USER: 1,
    }
)


def rank(role: Role | str) -> int:
    """Return the integer rank of a role (higher means more authority)."""
    return ROLE_RANK[Role(role)]
