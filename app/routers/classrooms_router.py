# /app/routers/classrooms_router.py

from fastapi import APIRouter, Depends

from ..core.deps import Caller, require_role, require_professor
from ..core.errors import parse_id
from ..core.identity import IdentityClaims, get_caller_identity
from ..db.models.user_models import UserRole
from ..models import classroom_model
from ..models.common_model import MessageResponse
from ..services import classroom_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

require_professor_viewer = require_role(UserRole.PROFESSOR, "Only professors can view classroom details")


def authenticated_classroom_id(
    classroom_id: str,
    identity: IdentityClaims = Depends(get_caller_identity),
) -> int:
    """Path id for the write routes, parsed once the caller is authenticated and before the role check."""
    return parse_id(classroom_id, "classroom ID")


# --- INDIVIDUAL CLASSROOM RESOURCE ENDPOINTS (/api/admin/companies/classrooms/{classroom_id}) ---

@router.get("/{classroom_id}", response_model=classroom_model.ClassroomDetails, summary="Get a Classroom with its Students")
def get_classroom(
    classroom_id: str,
    caller: Caller = Depends(require_professor_viewer),
    db: DatabaseService = Depends(get_db_service),
):
    return classroom_service.get_classroom_details(
        classroom_id=parse_id(classroom_id, "classroom ID"), professor_id=caller.user_id, db=db
    )


@router.put("/{classroom_id}", response_model=MessageResponse, summary="Update a Classroom")
def update_classroom(
    class_update: classroom_model.ClassroomUpdate,
    classroom_id: int = Depends(authenticated_classroom_id),
    caller: Caller = Depends(require_professor),
    db: DatabaseService = Depends(get_db_service),
):
    classroom_service.update_classroom(
        classroom_id=classroom_id,
        class_update=class_update,
        professor_id=caller.user_id,
        db=db,
    )
    return MessageResponse(message="Classroom updated successfully")


@router.delete("/{classroom_id}", response_model=MessageResponse, summary="Delete a Classroom and its Records")
def delete_classroom(
    classroom_id: int = Depends(authenticated_classroom_id),
    caller: Caller = Depends(require_professor),
    db: DatabaseService = Depends(get_db_service),
):
    classroom_service.delete_classroom(
        classroom_id=classroom_id, professor_id=caller.user_id, db=db
    )
    return MessageResponse(message="Classroom deleted successfully")
