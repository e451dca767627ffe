# /app/services/database_helpers/classroom_repository_sql.py

"""
This module contains the SQLAlchemy queries for classrooms and their
enrollments. Every read or write of professor-owned data takes the
`professor_id`, making this layer the final point of enforcement for
ownership.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy.orm import Session
from loguru import logger

from app.db.models.classroom_models import Classroom, StudentClassroom, Task, Meeting
from app.db.models.progress_models import TimeEntry, Report
from app.db.models.user_models import User


class ClassroomRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Classroom Methods ---

    def get_classrooms_by_professor(self, professor_id: int) -> List[Classroom]:
        return (
            self.db.query(Classroom)
            .filter(Classroom.professor_id == professor_id)
            .order_by(Classroom.id)
            .all()
        )

    def get_classroom_by_id(self, classroom_id: int, professor_id: int) -> Optional[Classroom]:
        """
        Retrieves a classroom only if it is owned by the given professor.
        A classroom owned by someone else is indistinguishable from a missing one.
        """
        return (
            self.db.query(Classroom)
            .filter(Classroom.id == classroom_id, Classroom.professor_id == professor_id)
            .first()
        )

    def get_classroom_unscoped(self, classroom_id: int) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.id == classroom_id).first()

    def get_classroom_by_join_code(self, join_code: str) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.join_code == join_code).first()

    def add_classroom(self, record: Dict) -> Classroom:
        new_classroom = Classroom(**record)
        self.db.add(new_classroom)
        self.db.commit()
        self.db.refresh(new_classroom)
        return new_classroom

    def update_classroom(self, classroom_id: int, professor_id: int, data: Dict) -> Optional[Classroom]:
        db_classroom = self.get_classroom_by_id(classroom_id=classroom_id, professor_id=professor_id)
        if db_classroom:
            for key, value in data.items():
                setattr(db_classroom, key, value)
            self.db.commit()
            self.db.refresh(db_classroom)
        return db_classroom

    def delete_classroom_cascade(self, classroom_id: int, professor_id: int) -> bool:
        """
        Deletes a classroom and every record that references it as one unit
        of work. Order: enrollments, time entries, reports, tasks, meetings,
        then the classroom row. Any failure rolls the whole unit back.
        """
        db_classroom = self.get_classroom_by_id(classroom_id=classroom_id, professor_id=professor_id)
        if not db_classroom:
            return False

        dependents = (
            ("student enrollments", StudentClassroom),
            ("time entries", TimeEntry),
            ("reports", Report),
            ("tasks", Task),
            ("meetings", Meeting),
        )
        try:
            for label, model in dependents:
                deleted = (
                    self.db.query(model)
                    .filter(model.classroom_id == classroom_id)
                    .delete(synchronize_session=False)
                )
                logger.debug(f"Deleted {deleted} {label} for classroom {classroom_id}")
            self.db.query(Classroom).filter(Classroom.id == classroom_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error(f"Rolled back deletion of classroom {classroom_id}")
            raise
        return True

    # --- Enrollment Methods ---

    def get_enrolled_students(self, classroom_id: int) -> List[Tuple[User, StudentClassroom]]:
        return (
            self.db.query(User, StudentClassroom)
            .join(StudentClassroom, StudentClassroom.student_id == User.id)
            .filter(StudentClassroom.classroom_id == classroom_id)
            .order_by(StudentClassroom.joined_at, StudentClassroom.id)
            .all()
        )

    def get_enrollment(self, student_id: int, classroom_id: int) -> Optional[StudentClassroom]:
        return (
            self.db.query(StudentClassroom)
            .filter(StudentClassroom.student_id == student_id, StudentClassroom.classroom_id == classroom_id)
            .first()
        )

    def get_enrollments_for_professor(self, professor_id: int) -> List[Dict]:
        """Flat enrollment records across all of a professor's classrooms (for counting)."""
        rows = (
            self.db.query(StudentClassroom.classroom_id, StudentClassroom.student_id)
            .join(Classroom, Classroom.id == StudentClassroom.classroom_id)
            .filter(Classroom.professor_id == professor_id)
            .all()
        )
        return [{"classroom_id": row.classroom_id, "student_id": row.student_id} for row in rows]

    def get_classrooms_for_student(self, student_id: int) -> List[Tuple[Classroom, StudentClassroom]]:
        return (
            self.db.query(Classroom, StudentClassroom)
            .join(StudentClassroom, StudentClassroom.classroom_id == Classroom.id)
            .filter(StudentClassroom.student_id == student_id)
            .order_by(StudentClassroom.joined_at, Classroom.id)
            .all()
        )

    def add_enrollment(self, record: Dict) -> StudentClassroom:
        new_enrollment = StudentClassroom(**record)
        self.db.add(new_enrollment)
        self.db.commit()
        self.db.refresh(new_enrollment)
        return new_enrollment

    def update_enrollment_progress(self, student_id: int, classroom_id: int, progress: int) -> Optional[StudentClassroom]:
        enrollment = self.get_enrollment(student_id=student_id, classroom_id=classroom_id)
        if enrollment:
            enrollment.progress = progress
            self.db.commit()
            self.db.refresh(enrollment)
        return enrollment
