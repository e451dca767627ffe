# /app/services/database_service.py

from typing import List, Dict, Optional, Tuple
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.user_models import User, UserRole
from app.db.models.classroom_models import Classroom, StudentClassroom
from app.db.models.progress_models import Report, TimeEntry

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.classroom_repository_sql import ClassroomRepositorySQL
from .database_helpers.report_repository_sql import ReportRepositorySQL
from .database_helpers.progress_repository_sql import ProgressRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        self.user_repo = UserRepositorySQL(db_session)
        self.classroom_repo = ClassroomRepositorySQL(db_session)
        self.report_repo = ReportRepositorySQL(db_session)
        self.progress_repo = ProgressRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_external_id(self, external_id: str) -> Optional[User]: return self.user_repo.get_user_by_external_id(external_id)
    def add_user(self, record: Dict) -> User: return self.user_repo.add_user(record)
    def set_user_role(self, user_id: int, role: UserRole) -> Optional[User]: return self.user_repo.set_user_role(user_id, role)

    # --- CLASSROOM METHODS (DELEGATED) ---
    def get_classrooms_by_professor(self, professor_id: int) -> List[Classroom]: return self.classroom_repo.get_classrooms_by_professor(professor_id)
    def get_classroom_by_id(self, classroom_id: int, professor_id: int) -> Optional[Classroom]: return self.classroom_repo.get_classroom_by_id(classroom_id, professor_id)
    def get_classroom_unscoped(self, classroom_id: int) -> Optional[Classroom]: return self.classroom_repo.get_classroom_unscoped(classroom_id)
    def get_classroom_by_join_code(self, join_code: str) -> Optional[Classroom]: return self.classroom_repo.get_classroom_by_join_code(join_code)
    def add_classroom(self, record: Dict) -> Classroom: return self.classroom_repo.add_classroom(record)
    def update_classroom(self, classroom_id: int, professor_id: int, data: Dict) -> Optional[Classroom]: return self.classroom_repo.update_classroom(classroom_id, professor_id, data)
    def delete_classroom_cascade(self, classroom_id: int, professor_id: int) -> bool: return self.classroom_repo.delete_classroom_cascade(classroom_id, professor_id)

    # --- ENROLLMENT METHODS (DELEGATED) ---
    def get_enrolled_students(self, classroom_id: int) -> List[Tuple[User, StudentClassroom]]: return self.classroom_repo.get_enrolled_students(classroom_id)
    def get_enrollment(self, student_id: int, classroom_id: int) -> Optional[StudentClassroom]: return self.classroom_repo.get_enrollment(student_id, classroom_id)
    def get_enrollments_for_professor(self, professor_id: int) -> List[Dict]: return self.classroom_repo.get_enrollments_for_professor(professor_id)
    def get_classrooms_for_student(self, student_id: int) -> List[Tuple[Classroom, StudentClassroom]]: return self.classroom_repo.get_classrooms_for_student(student_id)
    def add_enrollment(self, record: Dict) -> StudentClassroom: return self.classroom_repo.add_enrollment(record)
    def update_enrollment_progress(self, student_id: int, classroom_id: int, progress: int) -> Optional[StudentClassroom]: return self.classroom_repo.update_enrollment_progress(student_id, classroom_id, progress)

    # --- REPORT METHODS (DELEGATED) ---
    def get_report_with_classroom(self, report_id: int) -> Optional[Report]: return self.report_repo.get_report_with_classroom(report_id)
    def get_reports_by_classroom(self, classroom_id: int, professor_id: int) -> List[Report]: return self.report_repo.get_reports_by_classroom(classroom_id, professor_id)
    def get_reports_by_classroom_ids(self, classroom_ids: List[int]) -> List[Report]: return self.report_repo.get_reports_by_classroom_ids(classroom_ids)
    def add_report(self, record: Dict) -> Report: return self.report_repo.add_report(record)
    def set_report_review(self, report_id: int, status: str, feedback: Optional[str], set_feedback: bool = True) -> Optional[Report]: return self.report_repo.set_report_review(report_id, status, feedback, set_feedback)

    # --- PROGRESS METHODS (DELEGATED) ---
    def add_time_entry(self, record: Dict) -> TimeEntry: return self.progress_repo.add_time_entry(record)
    def get_completed_hours(self, student_id: int, classroom_id: int) -> float: return self.progress_repo.get_completed_hours(student_id, classroom_id)
    def get_student_progress_rows(self, professor_id: int) -> List[Dict]: return self.progress_repo.get_student_progress_rows(professor_id)


def get_db_service(db: Session = Depends(get_db)) -> DatabaseService:
    """
    A FastAPI dependency that provides a request-scoped DatabaseService.
    """
    return DatabaseService(db_session=db)
