"""
Signup and signin endpoints.

Both routes are public; they are how a caller obtains a token.
"""

from fastapi import APIRouter, Depends, status

from modules.auth.interfaces import ICredentialService

from ..dependencies import get_credential_service
from ..models.auth import AuthResponse, SignInRequest, SignUpRequest
from ..models.errors import ErrorResponse

router = APIRouter()


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def sign_up(
    body: SignUpRequest,
    service: ICredentialService = Depends(get_credential_service),
) -> AuthResponse:
    """Register a new account and return it with a bearer token."""
    result = await service.sign_up(body.name, body.email, body.password, body.role)
    return AuthResponse.from_result(result)


@router.post(
    "/signin",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def sign_in(
    body: SignInRequest,
    service: ICredentialService = Depends(get_credential_service),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    result = await service.sign_in(body.email, body.password)
    return AuthResponse.from_result(result)
