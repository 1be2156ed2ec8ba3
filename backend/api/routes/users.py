"""
User-related endpoints.

Provides endpoints for the current account, account listing and lookup
(admin only), and account update/delete under the policy checks.
"""

from fastapi import APIRouter, Depends, Query, status

from modules.pagination.service import DEFAULT_LIMIT, MAX_LIMIT
from modules.users.interfaces import IUserService
from shared.models import AuthenticatedUser

from ..dependencies import get_user_service
from ..middleware.auth import get_current_user, require_admin
from ..models.errors import ErrorResponse
from ..models.user import UpdateUserRequest, UserListResponse, UserResponse

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get the current user's account.

    Requires authentication.
    """
    account = await service.get_account(user.id)
    return UserResponse.from_account(account)


@router.get("", response_model=UserListResponse)
async def list_users(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page"),
    _admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> UserListResponse:
    """List accounts newest first (admin only)."""
    result = await service.list_accounts(limit=limit, page=page)
    return UserListResponse(
        data=[UserResponse.from_account(a) for a in result.data],
        meta=result.meta,
    )


@router.get(
    "/{account_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(
    account_id: str,
    _admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """Get one account by ID (admin only)."""
    account = await service.get_account(account_id)
    return UserResponse.from_account(account)


@router.patch(
    "/{account_id}",
    response_model=UserResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_user(
    account_id: str,
    body: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserResponse:
    """
    Update an account.

    Owners may edit themselves; admins may edit anyone and change roles.
    """
    account = await service.update_account(user.id, account_id, body.to_patch(), user.role)
    return UserResponse.from_account(account)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_user(
    account_id: str,
    user: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> None:
    """Delete an account (admin only, never yourself)."""
    await service.delete_account(user.id, account_id, user.role)
