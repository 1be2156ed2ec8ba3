"""
Bearer-token guard dependencies.

Extracts the bearer token from the Authorization header and hands it to
the guard pipeline together with the route's access policy. Failures are
raised as BastionError and turned into responses by the error handlers.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.access.models import AccessPolicy, AUTHENTICATED, ADMIN_ONLY
from modules.access.service import GuardPipeline
from shared.models import AuthenticatedUser

from ..dependencies import get_guard_pipeline

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def require_access(policy: AccessPolicy = AUTHENTICATED):
    """
    Build a dependency that enforces ``policy`` for a route.

    Usage:
        @router.get("/admin-only")
        async def route(user: AuthenticatedUser = Depends(require_access(ADMIN_ONLY))):
            ...
    """

    async def guard_dependency(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        guard: GuardPipeline = Depends(get_guard_pipeline),
    ) -> Optional[AuthenticatedUser]:
        token = credentials.credentials if credentials is not None else None
        return await guard.run(token, policy)

    return guard_dependency


get_current_user = require_access(AUTHENTICATED)
require_admin = require_access(ADMIN_ONLY)
