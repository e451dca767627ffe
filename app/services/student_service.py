# /app/services/student_service.py

from typing import List

from loguru import logger

from ..core.errors import InvalidInput, NotFound
from ..models import progress_model
from .database_service import DatabaseService
from .progress_service import compute_snapshot


def list_student_classrooms(student_id: int, db: DatabaseService) -> List[progress_model.StudentClassroom]:
    """Every classroom the student is enrolled in, each with a fresh progress snapshot."""
    return [
        progress_model.StudentClassroom(
            id=classroom.id,
            name=classroom.name,
            description=classroom.description,
            ojtHours=classroom.ojt_hours,
            startDate=classroom.start_date,
            endDate=classroom.end_date,
            isActive=classroom.is_active,
            progress=compute_snapshot(student_id, classroom, db),
        )
        for classroom, _enrollment in db.get_classrooms_for_student(student_id)
    ]


def join_classroom(join_code: str, student_id: int, db: DatabaseService) -> progress_model.StudentClassroom:
    classroom = db.get_classroom_by_join_code(join_code.strip().upper())
    if classroom is None:
        raise NotFound("No classroom matches that join code")
    if not classroom.is_active:
        raise InvalidInput("This classroom is no longer accepting students")
    if db.get_enrollment(student_id, classroom.id) is not None:
        raise InvalidInput("You are already enrolled in this classroom")

    db.add_enrollment({"student_id": student_id, "classroom_id": classroom.id, "progress": 0})
    logger.info(f"Student {student_id} joined classroom {classroom.id}")

    return progress_model.StudentClassroom(
        id=classroom.id,
        name=classroom.name,
        description=classroom.description,
        ojtHours=classroom.ojt_hours,
        startDate=classroom.start_date,
        endDate=classroom.end_date,
        isActive=classroom.is_active,
        progress=compute_snapshot(student_id, classroom, db),
    )
