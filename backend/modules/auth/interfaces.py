"""
Authentication module interface.

Other modules should depend on ICredentialService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.roles import Role

from .models import AuthResult


@runtime_checkable
class ICredentialService(Protocol):
    """
    Interface for signup and signin.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def sign_up(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
    ) -> AuthResult:
        """
        Register a new account and issue a token for it.

        Raises:
            BastionError(DUPLICATE_IDENTITY): If the email is already registered
        """
        ...

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """
        Check credentials and issue a token.

        Raises:
            BastionError(INVALID_CREDENTIALS): For an unknown email or a
                wrong password (indistinguishable)
        """
        ...
