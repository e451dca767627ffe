# /app/services/user_service.py

"""
Business logic for user records: first-sign-in registration, the one-time
role selection step, and the display-name rules shared by every DTO that
shows a person.
"""

from typing import Optional

from loguru import logger

from ..core.errors import InvalidInput
from ..core.identity import IdentityClaims
from ..db.models.user_models import User, UserRole
from ..models.user_model import UserProfile
from .database_service import DatabaseService


def display_name(
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
    fallback: str,
) -> str:
    """
    "First Last" when both names are present, otherwise the local part of the
    email, otherwise `fallback`.
    """
    if first_name and last_name:
        return f"{first_name} {last_name}"
    if email:
        local_part = email.split("@")[0]
        if local_part:
            return local_part
    return fallback


def to_profile(user: User) -> UserProfile:
    return UserProfile(
        id=user.id,
        email=user.email,
        firstName=user.first_name,
        lastName=user.last_name,
        name=display_name(user.first_name, user.last_name, user.email, f"User {user.id}"),
        role=user.role,
    )


def get_or_register_user(identity: IdentityClaims, db: DatabaseService) -> User:
    """
    Returns the user linked to the verified identity, creating it (with no
    role) the first time this identity signs in.
    """
    user = db.get_user_by_external_id(identity.subject)
    if user is not None:
        return user

    user = db.add_user({
        "external_id": identity.subject,
        "email": identity.email,
        "first_name": identity.first_name,
        "last_name": identity.last_name,
        "role": None,
    })
    logger.info(f"Registered user {user.id} for identity {identity.subject}")
    return user


def select_role(identity: IdentityClaims, role: UserRole, db: DatabaseService) -> User:
    """Assigns the caller's role. A role can be chosen exactly once."""
    user = get_or_register_user(identity, db)
    if user.role is not None:
        raise InvalidInput("Role has already been selected")

    updated = db.set_user_role(user.id, role)
    logger.info(f"User {user.id} selected role '{role.value}'")
    return updated
