"""
Access module errors (guard outcomes).
"""

from typing import Optional

from shared.exceptions import BastionError, ErrorKind
from shared.roles import Role


def unauthenticated(message: str = "Authentication required") -> BastionError:
    return BastionError(ErrorKind.UNAUTHENTICATED, message)


def forbidden(required_role: Optional[Role], caller_role: Role) -> BastionError:
    return BastionError(
        ErrorKind.FORBIDDEN,
        "Insufficient role for this route",
        details={
            "required_role": required_role.value if required_role else None,
            "caller_role": caller_role.value,
        },
    )
