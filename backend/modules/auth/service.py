"""
Credential service implementation.

Signs accounts up and in against the identity directory and issues
tokens through the token service.
"""

import logging

from shared.exceptions import BastionError, ErrorKind
from shared.roles import Role
from modules.tokens.interfaces import ITokenService
from modules.users.interfaces import IIdentityDirectory

from .exceptions import duplicate_identity, invalid_credentials
from .interfaces import ICredentialService
from .models import AuthResult
from .passwords import PasswordService

logger = logging.getLogger(__name__)


class CredentialService(ICredentialService):
    """
    Implementation of signup and signin.

    The duplicate-email lookup in sign_up is only a fast path. Two
    concurrent signups for the same email can both pass it; the directory's
    own uniqueness constraint decides the winner and the loser gets
    DUPLICATE_IDENTITY all the same.
    """

    def __init__(
        self,
        directory: IIdentityDirectory,
        tokens: ITokenService,
        passwords: PasswordService,
    ):
        self._directory = directory
        self._tokens = tokens
        self._passwords = passwords

    async def sign_up(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
    ) -> AuthResult:
        if await self._directory.find_by_email(email) is not None:
            raise duplicate_identity(email)

        password_hash = await self._passwords.hash_password(password)

        try:
            account = await self._directory.create_account(
                name=name,
                email=email,
                password_hash=password_hash,
                role=Role(role),
            )
        except BastionError as e:
            if e.kind == ErrorKind.DUPLICATE_IDENTITY:
                logger.info("Concurrent signup lost the uniqueness race")
                raise duplicate_identity(email) from None
            raise

        logger.info("Account %s signed up", account.id)
        token = self._tokens.issue(account.id, account.email)
        return AuthResult(account=account, token=token)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        account = await self._directory.find_by_email(email)

        if account is None or not account.password_hash:
            await self._passwords.burn_verification(password)
            raise invalid_credentials()

        if not await self._passwords.verify_password(account.password_hash, password):
            logger.info("Failed signin for account %s", account.id)
            raise invalid_credentials()

        token = self._tokens.issue(account.id, account.email)
        return AuthResult(account=account, token=token)
