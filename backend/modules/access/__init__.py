"""
Access module.

Role-rank authorization decisions and the guard pipeline that runs
authentication before the role check on every protected route.

Public API:
- decide / authorize: Pure role comparison
- GuardPipeline: Ordered authenticate -> require_role checks
- AccessPolicy: Per-route requirements (PUBLIC, AUTHENTICATED, ADMIN_ONLY)
"""

from .models import AccessContext, AccessPolicy, PUBLIC, AUTHENTICATED, ADMIN_ONLY
from .service import GuardCheck, GuardPipeline, authorize, decide

__all__ = [
    "AccessContext",
    "AccessPolicy",
    "PUBLIC",
    "AUTHENTICATED",
    "ADMIN_ONLY",
    "GuardCheck",
    "GuardPipeline",
    "authorize",
    "decide",
]
