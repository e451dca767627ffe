# /app/routers/users_router.py

"""
Endpoints for the signed-in user: first-sign-in registration, the one-time
role selection step, and the role-gated view decision for the dashboard shell.

These routes only require a verified identity, not an existing user row,
because they are what creates and completes that row.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..core.identity import IdentityClaims, get_caller_identity
from ..models import user_model
from ..services import user_service, view_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/me", response_model=user_model.UserProfile, summary="Get (and on first sign-in, register) the Current User")
def read_current_user(
    identity: IdentityClaims = Depends(get_caller_identity),
    db: DatabaseService = Depends(get_db_service),
):
    return user_service.to_profile(user_service.get_or_register_user(identity, db))


@router.post("/role-selection", response_model=user_model.UserProfile, summary="Choose the User's Role")
def select_role(
    payload: user_model.RoleSelectionRequest,
    identity: IdentityClaims = Depends(get_caller_identity),
    db: DatabaseService = Depends(get_db_service),
):
    return user_service.to_profile(user_service.select_role(identity, payload.role, db))


@router.get("/me/view", response_model=user_model.ViewResponse, summary="Decide which Dashboard View to Render")
def read_view(
    path: Optional[str] = None,
    identity: IdentityClaims = Depends(get_caller_identity),
    db: DatabaseService = Depends(get_db_service),
):
    user = db.get_user_by_external_id(identity.subject)
    role = user.role if user is not None else None
    return view_service.compose_view(path=path, role_loaded=True, role=role)
