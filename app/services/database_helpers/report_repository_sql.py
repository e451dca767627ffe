# /app/services/database_helpers/report_repository_sql.py

from datetime import datetime, timezone
from typing import Dict, List, Optional
from sqlalchemy.orm import Session, joinedload

from app.db.models.classroom_models import Classroom
from app.db.models.progress_models import Report


class ReportRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_report_with_classroom(self, report_id: int) -> Optional[Report]:
        return (
            self.db.query(Report)
            .options(joinedload(Report.classroom))
            .filter(Report.id == report_id)
            .first()
        )

    def get_reports_by_classroom(self, classroom_id: int, professor_id: int) -> List[Report]:
        """Reports for a single classroom, joined to the owner so foreign classrooms yield nothing."""
        return (
            self.db.query(Report)
            .join(Classroom, Classroom.id == Report.classroom_id)
            .options(joinedload(Report.student))
            .filter(Report.classroom_id == classroom_id, Classroom.professor_id == professor_id)
            .order_by(Report.id)
            .all()
        )

    def get_reports_by_classroom_ids(self, classroom_ids: List[int]) -> List[Report]:
        if not classroom_ids:
            return []
        return (
            self.db.query(Report)
            .options(joinedload(Report.student))
            .filter(Report.classroom_id.in_(classroom_ids))
            .order_by(Report.id)
            .all()
        )

    def add_report(self, record: Dict) -> Report:
        new_report = Report(**record)
        self.db.add(new_report)
        self.db.commit()
        self.db.refresh(new_report)
        return new_report

    def set_report_review(self, report_id: int, status: str, feedback: Optional[str], set_feedback: bool = True) -> Optional[Report]:
        """Updates the review decision. Feedback is only touched when `set_feedback` is true."""
        db_report = self.db.query(Report).filter(Report.id == report_id).first()
        if db_report:
            db_report.status = status
            if set_feedback:
                db_report.feedback = feedback
            db_report.updated_at = datetime.now(timezone.utc)
            self.db.commit()
            self.db.refresh(db_report)
        return db_report
