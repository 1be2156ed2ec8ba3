"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from settings.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.access.service import GuardPipeline
    from modules.auth.interfaces import ICredentialService
    from modules.auth.passwords import PasswordService
    from modules.tokens.interfaces import ITokenService
    from modules.users.interfaces import IIdentityDirectory, IUserService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. The Supabase directory needs an async client,
    so it is created by connect() during application startup; the
    in-memory directory is created on demand.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._tokens: "ITokenService | None" = None
        self._passwords: "PasswordService | None" = None
        self._directory: "IIdentityDirectory | None" = None
        self._credentials: "ICredentialService | None" = None
        self._users: "IUserService | None" = None
        self._guard: "GuardPipeline | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def connect(self) -> None:
        """Create the configured directory backend."""
        if self._directory is not None:
            return
        if self.settings.directory_backend == "supabase":
            from modules.users.repository import SupabaseIdentityDirectory
            from shared.database import get_supabase_client
            client = await get_supabase_client()
            self._directory = SupabaseIdentityDirectory(client, self.settings.accounts_table)

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._tokens is None:
            from modules.tokens.service import TokenService
            self._tokens = TokenService.from_settings(self.settings)
        return self._tokens

    @property
    def passwords(self) -> "PasswordService":
        """Get the password hashing service instance."""
        if self._passwords is None:
            from modules.auth.passwords import PasswordService
            self._passwords = PasswordService.from_settings(self.settings)
        return self._passwords

    @property
    def directory(self) -> "IIdentityDirectory":
        """Get the identity directory instance."""
        if self._directory is None:
            if self.settings.directory_backend == "supabase":
                raise RuntimeError("Supabase directory not connected; call connect() at startup")
            from modules.users.memory import InMemoryIdentityDirectory
            self._directory = InMemoryIdentityDirectory()
        return self._directory

    @directory.setter
    def directory(self, directory: "IIdentityDirectory") -> None:
        self._directory = directory
        self._credentials = None
        self._users = None
        self._guard = None

    @property
    def credentials(self) -> "ICredentialService":
        """Get the credential (signup/signin) service instance."""
        if self._credentials is None:
            from modules.auth.service import CredentialService
            self._credentials = CredentialService(
                directory=self.directory,
                tokens=self.tokens,
                passwords=self.passwords,
            )
        return self._credentials

    @property
    def users(self) -> "IUserService":
        """Get the user policy service instance."""
        if self._users is None:
            from modules.users.service import UserService
            self._users = UserService(self.directory)
        return self._users

    @property
    def guard(self) -> "GuardPipeline":
        """Get the guard pipeline instance."""
        if self._guard is None:
            from modules.access.service import GuardPipeline
            self._guard = GuardPipeline(tokens=self.tokens, directory=self.directory)
        return self._guard

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._tokens = None
        self._passwords = None
        self._directory = None
        self._credentials = None
        self._users = None
        self._guard = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a prepared container (used by tests and scripts)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_credential_service() -> "ICredentialService":
    """FastAPI dependency for the credential service."""
    return get_container().credentials


def get_user_service() -> "IUserService":
    """FastAPI dependency for the user policy service."""
    return get_container().users


def get_guard_pipeline() -> "GuardPipeline":
    """FastAPI dependency for the guard pipeline."""
    return get_container().guard
