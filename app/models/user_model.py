# /app/models/user_model.py

from typing import Optional
from pydantic import BaseModel

from ..db.models.user_models import UserRole


class UserProfile(BaseModel):
    id: int
    email: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    name: str
    role: Optional[UserRole] = None


class RoleSelectionRequest(BaseModel):
    role: UserRole


class ViewResponse(BaseModel):
    view: str
    role: Optional[UserRole] = None
    redirect: Optional[str] = None
