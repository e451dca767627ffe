# /app/services/database_helpers/progress_repository_sql.py

"""
Queries behind OJT progress: logged time entries and the per-professor
student progress roll-up.
"""

from typing import Dict, List
from sqlalchemy import func, and_
from sqlalchemy.orm import Session

from app.db.models.classroom_models import Classroom, StudentClassroom
from app.db.models.progress_models import TimeEntry
from app.db.models.user_models import User


class ProgressRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_time_entry(self, record: Dict) -> TimeEntry:
        new_entry = TimeEntry(**record)
        self.db.add(new_entry)
        self.db.commit()
        self.db.refresh(new_entry)
        return new_entry

    def get_completed_hours(self, student_id: int, classroom_id: int) -> float:
        total = (
            self.db.query(func.coalesce(func.sum(TimeEntry.hours), 0.0))
            .filter(TimeEntry.student_id == student_id, TimeEntry.classroom_id == classroom_id)
            .scalar()
        )
        return float(total or 0.0)

    def get_student_progress_rows(self, professor_id: int) -> List[Dict]:
        """
        One round trip returning every (student, classroom) enrollment under the
        professor together with the student's summed hours in that classroom.

        Rows come back ordered by enrollment time, then classroom id, so the
        first row seen for a student is their earliest enrollment.
        """
        hours = (
            self.db.query(
                TimeEntry.student_id.label("student_id"),
                TimeEntry.classroom_id.label("classroom_id"),
                func.sum(TimeEntry.hours).label("completed_hours"),
            )
            .group_by(TimeEntry.student_id, TimeEntry.classroom_id)
            .subquery()
        )

        rows = (
            self.db.query(
                User,
                Classroom,
                func.coalesce(hours.c.completed_hours, 0.0).label("completed_hours"),
            )
            .select_from(StudentClassroom)
            .join(Classroom, Classroom.id == StudentClassroom.classroom_id)
            .join(User, User.id == StudentClassroom.student_id)
            .outerjoin(
                hours,
                and_(
                    hours.c.student_id == StudentClassroom.student_id,
                    hours.c.classroom_id == StudentClassroom.classroom_id,
                ),
            )
            .filter(Classroom.professor_id == professor_id)
            .order_by(StudentClassroom.joined_at, Classroom.id, StudentClassroom.id)
            .all()
        )
        return [
            {"student": user, "classroom": classroom, "completed_hours": float(completed or 0.0)}
            for user, classroom, completed in rows
        ]
