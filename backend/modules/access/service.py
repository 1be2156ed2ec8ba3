"""
Role-based access decisions and the per-request guard pipeline.

The pipeline is an explicit, ordered tuple of checks. Each check either
returns normally or raises, and the first raise ends the run, so the
role check never sees a request whose token did not verify.
"""

import logging
from typing import Awaitable, Callable, Optional, Sequence

from shared.exceptions import BastionError, ErrorKind
from shared.models import AuthenticatedUser
from shared.roles import Role, rank
from modules.tokens.interfaces import ITokenService
from modules.users.interfaces import IIdentityDirectory

from .exceptions import forbidden, unauthenticated
from .models import AccessContext, AccessPolicy

logger = logging.getLogger(__name__)

GuardCheck = Callable[[AccessContext], Awaitable[None]]


def decide(required_role: Optional[Role], caller_role: Role) -> bool:
    """Allow when no role is required, else when the caller ranks at least as high."""
    if required_role is None:
        return True
    return rank(caller_role) >= rank(required_role)


# Name used by the transport-facing surface.
authorize = decide


class GuardPipeline:
    """
    Runs the access checks for a route.

    Default order: authenticate, then require_role.
    """

    def __init__(
        self,
        tokens: ITokenService,
        directory: IIdentityDirectory,
        checks: Optional[Sequence[GuardCheck]] = None,
    ):
        self._tokens = tokens
        self._directory = directory
        self._checks: tuple[GuardCheck, ...] = (
            tuple(checks) if checks is not None else (self.authenticate, self.require_role)
        )

    @property
    def checks(self) -> tuple[GuardCheck, ...]:
        return self._checks

    async def run(self, token: Optional[str], policy: AccessPolicy) -> Optional[AuthenticatedUser]:
        """
        Evaluate the checks in order for one request.

        Returns:
            The resolved caller, or None for a public route

        Raises:
            BastionError(UNAUTHENTICATED | FORBIDDEN)
        """
        if policy.public:
            return None

        context = AccessContext(policy=policy, token=token)
        for check in self._checks:
            await check(context)
        return context.caller

    async def authenticate(self, context: AccessContext) -> None:
        """Verify the bearer token and load the account it names."""
        if not context.token:
            raise unauthenticated()

        try:
            claims = self._tokens.verify(context.token)
        except BastionError as e:
            if e.kind == ErrorKind.INVALID_TOKEN:
                raise unauthenticated(e.message) from None
            raise

        account = await self._directory.find_by_id(claims.sub)
        if account is None:
            logger.info("Token for missing account %s rejected", claims.sub)
            raise unauthenticated("User does not exist")

        context.caller = AuthenticatedUser(
            id=account.id,
            email=account.email,
            role=account.role,
        )

    async def require_role(self, context: AccessContext) -> None:
        """Compare the caller's role with the route's minimum role."""
        if context.caller is None:
            raise unauthenticated()

        required = context.policy.minimum_role
        if not decide(required, context.caller.role):
            logger.info(
                "Account %s (%s) denied route requiring %s",
                context.caller.id,
                context.caller.role.value,
                required.value if required else None,
            )
            raise forbidden(required, context.caller.role)
