# /app/services/view_service.py

"""
View Composition.

Decides which dashboard subtree a caller should see. The decision is a pure
function of the requested path and the role that was resolved for this
request, so the same rules serve the API and the dashboard client.
"""

import enum
from typing import Optional

from ..core.config import ROLE_SELECTION_PATH
from ..db.models.user_models import UserRole
from ..models.user_model import ViewResponse


class ViewState(str, enum.Enum):
    RESOLVING = "resolving"
    PROFESSOR = "professor"
    STUDENT = "student"
    UNASSIGNED = "unassigned"
    ROLE_SELECTION = "role_selection"


def compose_view(path: Optional[str], role_loaded: bool, role: Optional[UserRole]) -> ViewResponse:
    # The role-selection page renders whatever the role state is.
    if path == ROLE_SELECTION_PATH:
        return ViewResponse(view=ViewState.ROLE_SELECTION.value, role=role)

    if not role_loaded:
        return ViewResponse(view=ViewState.RESOLVING.value)

    if role == UserRole.PROFESSOR:
        return ViewResponse(view=ViewState.PROFESSOR.value, role=role)
    if role == UserRole.STUDENT:
        return ViewResponse(view=ViewState.STUDENT.value, role=role)

    return ViewResponse(view=ViewState.UNASSIGNED.value, redirect=ROLE_SELECTION_PATH)
