# /app/services/classroom_service.py

"""
Classroom Directory.

This service is the business layer for professor-owned classrooms. It is a
facade over the `classroom_helpers.crud` specialist and the DatabaseService;
every function takes the resolved professor id so that all reads and writes
are scoped to the owner.
"""

from typing import Dict, List

import pandas as pd

from ..core.errors import NotFound
from ..db.models.classroom_models import Classroom
from ..models import classroom_model
from .database_service import DatabaseService
from .classroom_helpers import crud
from .user_service import display_name


def _classroom_fields(classroom: Classroom) -> Dict:
    return {
        "id": classroom.id,
        "name": classroom.name,
        "description": classroom.description,
        "professorId": classroom.professor_id,
        "ojtHours": classroom.ojt_hours,
        "startDate": classroom.start_date,
        "endDate": classroom.end_date,
        "isActive": classroom.is_active,
        "joinCode": classroom.join_code,
        "createdAt": classroom.created_at,
        "updatedAt": classroom.updated_at,
    }


def to_classroom(classroom: Classroom) -> classroom_model.Classroom:
    return classroom_model.Classroom(**_classroom_fields(classroom))


# --- Facade Methods for CRUD Operations ---

def create_classroom(class_data: classroom_model.ClassroomCreate, professor_id: int, db: DatabaseService) -> classroom_model.Classroom:
    return to_classroom(crud.create_classroom(class_data, professor_id, db))


def update_classroom(classroom_id: int, class_update: classroom_model.ClassroomUpdate, professor_id: int, db: DatabaseService) -> classroom_model.Classroom:
    return to_classroom(crud.update_classroom(classroom_id, class_update, professor_id, db))


def delete_classroom(classroom_id: int, professor_id: int, db: DatabaseService) -> None:
    crud.delete_classroom(classroom_id, professor_id, db)


# --- Data Assembly ---

def get_classrooms_with_summary(professor_id: int, db: DatabaseService) -> List[classroom_model.ClassroomSummary]:
    """All of a professor's classrooms, each enriched with its enrolled student count."""
    classrooms = db.get_classrooms_by_professor(professor_id)
    if not classrooms:
        return []

    enrollments_df = pd.DataFrame(db.get_enrollments_for_professor(professor_id))
    student_counts = {}
    if not enrollments_df.empty:
        student_counts = enrollments_df.groupby("classroom_id").size().to_dict()

    return [
        classroom_model.ClassroomSummary(
            **_classroom_fields(classroom),
            studentCount=int(student_counts.get(classroom.id, 0)),
        )
        for classroom in classrooms
    ]


def get_classroom_details(classroom_id: int, professor_id: int, db: DatabaseService) -> classroom_model.ClassroomDetails:
    """The classroom joined with its enrolled students and their stored progress."""
    classroom = crud.get_owned_classroom(classroom_id, professor_id, db)
    if classroom is None:
        raise NotFound("Classroom not found or you don't have permission to view it")

    students = [
        classroom_model.ClassroomStudent(
            id=student.id,
            name=display_name(student.first_name, student.last_name, student.email, f"Student {student.id}"),
            email=student.email,
            firstName=student.first_name,
            lastName=student.last_name,
            progress=enrollment.progress or 0,
        )
        for student, enrollment in db.get_enrolled_students(classroom.id)
    ]
    return classroom_model.ClassroomDetails(**_classroom_fields(classroom), students=students)
