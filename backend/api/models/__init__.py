"""API models package."""

from .auth import AuthResponse, SignInRequest, SignUpRequest
from .errors import ErrorResponse
from .user import UpdateUserRequest, UserListResponse, UserResponse

__all__ = [
    "AuthResponse",
    "SignInRequest",
    "SignUpRequest",
    "ErrorResponse",
    "UpdateUserRequest",
    "UserListResponse",
    "UserResponse",
]
