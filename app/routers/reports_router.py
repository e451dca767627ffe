# /app/routers/reports_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends

from ..core.deps import Caller, require_professor
from ..core.errors import parse_id
from ..models import report_model
from ..models.common_model import MessageResponse
from ..services import report_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[report_model.Report], summary="List Reports in the Professor's Classrooms")
def list_reports(
    classroomId: Optional[str] = None,
    caller: Caller = Depends(require_professor),
    db: DatabaseService = Depends(get_db_service),
):
    classroom_id = parse_id(classroomId, "classroom ID") if classroomId else None
    return report_service.list_reports(professor_id=caller.user_id, db=db, classroom_id=classroom_id)


@router.post("/review", response_model=MessageResponse, summary="Approve or Reject a Report")
def review_report(
    review: report_model.ReviewRequest,
    caller: Caller = Depends(require_professor),
    db: DatabaseService = Depends(get_db_service),
):
    message = report_service.review_report(review=review, professor_id=caller.user_id, db=db)
    return MessageResponse(message=message)
