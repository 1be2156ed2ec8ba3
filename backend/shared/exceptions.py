"""
Error type for the Bastion backend.

Every recoverable failure raised by the core is a BastionError tagged with
an ErrorKind. Callers match on ``error.kind`` instead of on exception
subclasses, and the API layer maps each kind to one HTTP status.
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """Closed set of error kinds raised by the core."""

    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_FOUND = "NOT_FOUND"
    SELF_DELETION = "SELF_DELETION"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    UNAUTHORIZED_UPDATE = "UNAUTHORIZED_UPDATE"
    EMAIL_IN_USE = "EMAIL_IN_USE"

    # Guard outcomes
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"


class BastionError(Exception):
    """
    Base exception for all Bastion errors.

    Carries a kind, a human-readable message and optional details that are
    safe to return to the client.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message
        self.details = details or {}

    @property
    def code(self) -> str:
        """Stable string code for API responses."""
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"BastionError({self.kind.value}, {self.message!r})"
