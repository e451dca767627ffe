# /app/core/deps.py

"""
Role Resolution.

Every protected route re-derives the caller's internal user record and role
from the verified identity, once per request. Handlers receive the resolved
`Caller` explicitly; nothing downstream reads ambient session state.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends

from ..db.models.user_models import User, UserRole
from ..services.database_service import DatabaseService, get_db_service
from .errors import Unauthenticated, Forbidden
from .identity import IdentityClaims, get_caller_identity


@dataclass(frozen=True)
class Caller:
    user_id: int
    role: Optional[UserRole]
    user: User


def resolve_caller(identity: IdentityClaims, db: DatabaseService) -> Caller:
    """Maps a verified identity onto its internal user; unknown users are unauthenticated."""
    user = db.get_user_by_external_id(identity.subject)
    if user is None:
        raise Unauthenticated("Unauthorized")
    return Caller(user_id=user.id, role=user.role, user=user)


def get_caller(
    identity: IdentityClaims = Depends(get_caller_identity),
    db: DatabaseService = Depends(get_db_service),
) -> Caller:
    return resolve_caller(identity, db)


def require_role(required_role: UserRole, message: Optional[str] = None):
    """Builds a dependency that only lets callers holding `required_role` through."""
    def role_checker(caller: Caller = Depends(get_caller)) -> Caller:
        if caller.role != required_role:
            raise Forbidden(message or f"Forbidden: {required_role.value.capitalize()} access required")
        return caller
    return role_checker


require_professor = require_role(UserRole.PROFESSOR)
require_student = require_role(UserRole.STUDENT)
