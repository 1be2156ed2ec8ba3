from datetime import timedelta

import pytest

from modules.access.models import ADMIN_ONLY, AUTHENTICATED, PUBLIC, AccessContext, AccessPolicy
from modules.access.service import GuardPipeline, authorize, decide
from modules.tokens.exceptions import INVALID_TOKEN_MESSAGE
from shared.exceptions import BastionError, ErrorKind
from shared.roles import Role


async def add_account(directory, email: str, role: Role = Role.USER):
    return await directory.create_account(
        name=email.split("@")[0],
        email=email,
        password_hash="unused",
        role=role,
    )


class TestDecide:
    @pytest.mark.parametrize(
        "required,caller,allowed",
        [
            (None, Role.USER, True),
            (None, Role.ADMIN, True),
            (Role.USER, Role.USER, True),
            (Role.USER, Role.ADMIN, True),
            (Role.ADMIN, Role.ADMIN, True),
            (Role.ADMIN, Role.USER, False),
        ],
    )
    def test_rank_comparison(self, required, caller, allowed):
        assert decide(required, caller) is allowed

    def test_authorize_alias(self):
        assert authorize is decide


class TestGuardPipeline:
    def test_default_order(self, guard):
        assert [check.__name__ for check in guard.checks] == ["authenticate", "require_role"]

    @pytest.mark.asyncio
    async def test_public_route_needs_no_token(self, guard):
        assert await guard.run(None, PUBLIC) is None

    @pytest.mark.asyncio
    async def test_missing_token(self, guard):
        with pytest.raises(BastionError) as exc_info:
            await guard.run(None, AUTHENTICATED)
        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_invalid_token(self, guard):
        with pytest.raises(BastionError) as exc_info:
            await guard.run("garbage", AUTHENTICATED)
        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
        assert exc_info.value.message == INVALID_TOKEN_MESSAGE

    @pytest.mark.asyncio
    async def test_expired_token(self, guard, tokens, directory):
        account = await add_account(directory, "ada@example.com")
        token = tokens.issue(account.id, account.email, ttl=timedelta(seconds=-5))

        with pytest.raises(BastionError) as exc_info:
            await guard.run(token, AUTHENTICATED)
        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_authenticated_caller(self, guard, tokens, directory):
        account = await add_account(directory, "ada@example.com")

        caller = await guard.run(tokens.issue(account.id, account.email), AUTHENTICATED)

        assert caller.id == account.id
        assert caller.email == "ada@example.com"
        assert caller.role == Role.USER

    @pytest.mark.asyncio
    async def test_deleted_account(self, guard, tokens, directory):
        """A valid token for an account that no longer exists is rejected."""
        account = await add_account(directory, "ada@example.com")
        token = tokens.issue(account.id, account.email)
        await directory.delete_by_id(account.id)

        with pytest.raises(BastionError) as exc_info:
            await guard.run(token, AUTHENTICATED)
        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
        assert exc_info.value.message == "User does not exist"

    @pytest.mark.asyncio
    async def test_user_on_admin_route(self, guard, tokens, directory):
        account = await add_account(directory, "ada@example.com")

        with pytest.raises(BastionError) as exc_info:
            await guard.run(tokens.issue(account.id, account.email), ADMIN_ONLY)
        assert exc_info.value.kind == ErrorKind.FORBIDDEN
        assert exc_info.value.details == {"required_role": "admin", "caller_role": "user"}

    @pytest.mark.asyncio
    async def test_admin_on_admin_route(self, guard, tokens, directory):
        account = await add_account(directory, "root@example.com", Role.ADMIN)
        caller = await guard.run(tokens.issue(account.id, account.email), ADMIN_ONLY)
        assert caller.is_admin

    @pytest.mark.asyncio
    async def test_role_is_read_from_directory(self, guard, tokens, directory):
        """A promotion applies to tokens issued before it."""
        account = await add_account(directory, "ada@example.com")
        token = tokens.issue(account.id, account.email)

        await directory.update_by_id(account.id, {"role": "admin"})

        caller = await guard.run(token, ADMIN_ONLY)
        assert caller.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_user_minimum_role(self, guard, tokens, directory):
        account = await add_account(directory, "ada@example.com")
        caller = await guard.run(
            tokens.issue(account.id, account.email),
            AccessPolicy(minimum_role=Role.USER),
        )
        assert caller.id == account.id

    @pytest.mark.asyncio
    async def test_first_failure_stops_the_run(self, tokens, directory):
        calls = []

        async def failing(context: AccessContext) -> None:
            calls.append("failing")
            raise BastionError(ErrorKind.UNAUTHENTICATED, "stop")

        async def never(context: AccessContext) -> None:
            calls.append("never")

        pipeline = GuardPipeline(tokens=tokens, directory=directory, checks=[failing, never])

        with pytest.raises(BastionError):
            await pipeline.run("anything", AUTHENTICATED)
        assert calls == ["failing"]

    @pytest.mark.asyncio
    async def test_require_role_without_caller(self, guard):
        with pytest.raises(BastionError) as exc_info:
            await guard.require_role(AccessContext(policy=ADMIN_ONLY, token=None))
        assert exc_info.value.kind == ErrorKind.UNAUTHENTICATED
