# /app/routers/student_router.py

from typing import List

from fastapi import APIRouter, Depends, status

from ..core.deps import Caller, get_caller, require_student
from ..core.errors import parse_id
from ..models import progress_model, report_model
from ..services import progress_service, report_service, student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("/classrooms", response_model=List[progress_model.StudentClassroom], summary="List the Student's Classrooms")
def list_my_classrooms(caller: Caller = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    return student_service.list_student_classrooms(student_id=caller.user_id, db=db)


@router.post(
    "/classrooms/join",
    response_model=progress_model.StudentClassroom,
    status_code=status.HTTP_201_CREATED,
    summary="Join a Classroom by Code",
)
def join_classroom(
    payload: progress_model.JoinClassroomRequest,
    caller: Caller = Depends(require_student),
    db: DatabaseService = Depends(get_db_service),
):
    return student_service.join_classroom(join_code=payload.joinCode, student_id=caller.user_id, db=db)


@router.get("/progress", response_model=progress_model.ProgressSnapshot, summary="Get a Student's Progress in a Classroom")
def get_progress(
    studentId: str,
    classroomId: str,
    caller: Caller = Depends(get_caller),
    db: DatabaseService = Depends(get_db_service),
):
    return progress_service.get_progress(
        student_id=parse_id(studentId, "student ID"),
        classroom_id=parse_id(classroomId, "classroom ID"),
        caller_id=caller.user_id,
        caller_role=caller.role,
        db=db,
    )


@router.post(
    "/time-entries",
    response_model=progress_model.TimeEntry,
    status_code=status.HTTP_201_CREATED,
    summary="Log OJT Hours",
)
def log_time_entry(
    entry: progress_model.TimeEntryCreate,
    caller: Caller = Depends(require_student),
    db: DatabaseService = Depends(get_db_service),
):
    return progress_service.log_time_entry(entry=entry, student_id=caller.user_id, db=db)


@router.post(
    "/reports",
    response_model=report_model.Report,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a Daily or Weekly Report",
)
def submit_report(
    report_create: report_model.ReportCreate,
    caller: Caller = Depends(require_student),
    db: DatabaseService = Depends(get_db_service),
):
    return report_service.submit_report(report_data=report_create, student_id=caller.user_id, db=db)
