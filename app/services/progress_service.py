# /app/services/progress_service.py

"""
Progress tracking and the professor-side Progress Aggregation.

Completed hours are the sum of a student's logged time entries in a
classroom; required hours come from the classroom. The professor's student
list is built from one joined query and de-duplicated so each student
appears once, under their earliest enrollment.
"""

import math
from typing import Dict, Optional

import pandas as pd
from loguru import logger

from ..core.config import DEFAULT_OJT_HOURS
from ..core.errors import Forbidden, NotFound
from ..db.models.classroom_models import Classroom
from ..db.models.user_models import UserRole
from ..models import progress_model
from .database_service import DatabaseService
from .user_service import display_name

EXPORT_COLUMNS = ["Student Name", "Email", "Classroom", "Completed Hours", "Required Hours", "Progress (%)"]


def required_hours_for(classroom: Classroom) -> int:
    return classroom.ojt_hours or DEFAULT_OJT_HOURS


def progress_percentage(completed_hours: float, required_hours: int) -> int:
    """Whole-number completion percentage, rounded half up and clamped to 0..100."""
    if not required_hours or required_hours <= 0:
        return 0
    percentage = math.floor(completed_hours / required_hours * 100 + 0.5)
    return max(0, min(100, percentage))


def build_snapshot(student_id: int, classroom: Classroom, completed_hours: float) -> progress_model.ProgressSnapshot:
    required = required_hours_for(classroom)
    return progress_model.ProgressSnapshot(
        id=student_id,
        studentId=student_id,
        classroomId=classroom.id,
        completedHours=round(completed_hours, 2),
        requiredHours=required,
        progressPercentage=progress_percentage(completed_hours, required),
    )


def compute_snapshot(student_id: int, classroom: Classroom, db: DatabaseService) -> progress_model.ProgressSnapshot:
    return build_snapshot(student_id, classroom, db.get_completed_hours(student_id, classroom.id))


def get_progress(
    student_id: int,
    classroom_id: int,
    caller_id: int,
    caller_role: Optional[UserRole],
    db: DatabaseService,
) -> progress_model.ProgressSnapshot:
    """
    Progress snapshot for (student, classroom). Students may only read their
    own progress; professors only within classrooms they own.
    """
    if caller_role == UserRole.STUDENT:
        if student_id != caller_id:
            raise Forbidden("Forbidden: You can only view your own progress")
        classroom = db.get_classroom_unscoped(classroom_id)
    elif caller_role == UserRole.PROFESSOR:
        classroom = db.get_classroom_by_id(classroom_id, caller_id)
    else:
        raise Forbidden("Forbidden: A role is required to view progress")

    if classroom is None:
        raise NotFound("Classroom not found")
    if db.get_enrollment(student_id, classroom_id) is None:
        raise NotFound("Student is not enrolled in this classroom")

    return compute_snapshot(student_id, classroom, db)


def refresh_enrollment_progress(student_id: int, classroom: Classroom, db: DatabaseService) -> progress_model.ProgressSnapshot:
    """Recomputes the snapshot and stores its percentage on the enrollment row."""
    snapshot = compute_snapshot(student_id, classroom, db)
    db.update_enrollment_progress(student_id, classroom.id, snapshot.progressPercentage)
    return snapshot


def log_time_entry(entry: progress_model.TimeEntryCreate, student_id: int, db: DatabaseService) -> progress_model.TimeEntry:
    classroom = db.get_classroom_unscoped(entry.classroomId)
    if classroom is None or db.get_enrollment(student_id, entry.classroomId) is None:
        raise NotFound("Classroom not found or you are not enrolled in it")

    record = db.add_time_entry({
        "student_id": student_id,
        "classroom_id": classroom.id,
        "entry_date": entry.entryDate,
        "hours": entry.hours,
        "description": entry.description,
    })
    snapshot = refresh_enrollment_progress(student_id, classroom, db)
    logger.info(f"Student {student_id} logged {entry.hours}h in classroom {classroom.id}")

    return progress_model.TimeEntry(
        id=record.id,
        studentId=record.student_id,
        classroomId=record.classroom_id,
        entryDate=record.entry_date,
        hours=record.hours,
        description=record.description,
        createdAt=record.created_at,
        progress=snapshot,
    )


# --- Professor Student List ---

def get_student_progress_list(professor_id: int, db: DatabaseService) -> progress_model.StudentProgressList:
    """
    One row per distinct student across the professor's classrooms. The rows
    arrive ordered by enrollment time, so the first one kept per student is
    their earliest enrollment (ties broken by classroom id).
    """
    rows_by_student: Dict[int, progress_model.StudentProgressRow] = {}
    for row in db.get_student_progress_rows(professor_id):
        student, classroom = row["student"], row["classroom"]
        if student.id in rows_by_student:
            continue
        snapshot = build_snapshot(student.id, classroom, row["completed_hours"])
        rows_by_student[student.id] = progress_model.StudentProgressRow(
            id=student.id,
            name=display_name(student.first_name, student.last_name, student.email, "Unknown"),
            email=student.email,
            classroom=classroom.name,
            classroomId=classroom.id,
            progress=snapshot.progressPercentage,
            completedHours=snapshot.completedHours,
            requiredHours=snapshot.requiredHours,
        )
    return progress_model.StudentProgressList(students=list(rows_by_student.values()))


def export_student_progress_csv(professor_id: int, db: DatabaseService) -> str:
    students = get_student_progress_list(professor_id, db).students
    export_data = [
        {
            "Student Name": s.name,
            "Email": s.email or "N/A",
            "Classroom": s.classroom,
            "Completed Hours": s.completedHours,
            "Required Hours": s.requiredHours,
            "Progress (%)": s.progress,
        }
        for s in students
    ]
    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
