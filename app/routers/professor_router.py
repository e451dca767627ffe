# /app/routers/professor_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse

from ..core.deps import Caller, require_professor
from ..models import classroom_model, progress_model
from ..services import classroom_service, progress_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


# --- CLASSROOM COLLECTION ENDPOINTS (/api/prof/companies/classrooms) ---

@router.get("/companies/classrooms", response_model=classroom_model.ClassroomListResponse, summary="List the Professor's Classrooms")
def list_classrooms(caller: Caller = Depends(require_professor), db: DatabaseService = Depends(get_db_service)):
    classrooms = classroom_service.get_classrooms_with_summary(professor_id=caller.user_id, db=db)
    return classroom_model.ClassroomListResponse(classrooms=classrooms)


@router.post(
    "/companies/classrooms",
    response_model=classroom_model.Classroom,
    status_code=status.HTTP_201_CREATED,
    summary="Create a Classroom",
)
def create_classroom(
    class_create: classroom_model.ClassroomCreate,
    caller: Caller = Depends(require_professor),
    db: DatabaseService = Depends(get_db_service),
):
    return classroom_service.create_classroom(class_data=class_create, professor_id=caller.user_id, db=db)


# --- STUDENT PROGRESS ENDPOINTS (/api/prof/students) ---

@router.get("/students", response_model=progress_model.StudentProgressList, summary="List Students with OJT Progress")
def list_students(caller: Caller = Depends(require_professor), db: DatabaseService = Depends(get_db_service)):
    return progress_service.get_student_progress_list(professor_id=caller.user_id, db=db)


@router.get("/students/export", summary="Export Student Progress as CSV", response_class=StreamingResponse)
def export_students(caller: Caller = Depends(require_professor), db: DatabaseService = Depends(get_db_service)):
    csv_string = progress_service.export_student_progress_csv(professor_id=caller.user_id, db=db)
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=student_progress.csv"},
    )
