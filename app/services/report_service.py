# /app/services/report_service.py

"""
Report Review Workflow.

Professors list the reports submitted in their classrooms and move each one
from `pending` to `approved` or `rejected`. Students submit new reports.
Ownership of the parent classroom is checked before every status change.
"""

from typing import List, Optional

from loguru import logger

from ..core.errors import Forbidden, InvalidInput, NotFound
from ..db.models.progress_models import Report, ReportStatus, ReportType
from ..models import report_model
from .database_service import DatabaseService
from .user_service import display_name

REVIEWABLE_STATUSES = {ReportStatus.APPROVED.value, ReportStatus.REJECTED.value}


def to_report_dto(report: Report) -> report_model.Report:
    student = report.student
    student_summary = None
    if student is not None:
        student_summary = report_model.ReportStudent(
            id=student.id,
            name=display_name(student.first_name, student.last_name, student.email, f"Student {student.id}"),
            email=student.email,
        )
        submitted_by = student_summary.name
    else:
        submitted_by = f"Student {report.student_id}"

    return report_model.Report(
        id=report.id,
        title=report.title or "Untitled Report",
        description=report.description,
        type=report.type or ReportType.DAILY.value,
        studentId=report.student_id,
        classroomId=report.classroom_id,
        status=report.status or ReportStatus.PENDING.value,
        submissionUrl=report.submission_url,
        feedback=report.feedback,
        createdAt=report.created_at,
        updatedAt=report.updated_at,
        dueDate=report.due_date,
        student=student_summary,
        submittedBy=submitted_by,
    )


def list_reports(professor_id: int, db: DatabaseService, classroom_id: Optional[int] = None) -> List[report_model.Report]:
    """
    Reports for one classroom when `classroom_id` is given, otherwise for
    every classroom the professor owns.
    """
    if classroom_id is not None:
        reports = db.get_reports_by_classroom(classroom_id, professor_id)
        logger.debug(f"Found {len(reports)} reports for classroom {classroom_id}")
    else:
        classrooms = db.get_classrooms_by_professor(professor_id)
        if not classrooms:
            return []
        reports = db.get_reports_by_classroom_ids([c.id for c in classrooms])
        logger.debug(f"Found {len(reports)} total reports for professor {professor_id}")

    return [to_report_dto(report) for report in reports]


def review_report(review: report_model.ReviewRequest, professor_id: int, db: DatabaseService) -> str:
    """
    Sets a report's status and feedback. Returns the confirmation message.
    Re-reviewing an already decided report simply overwrites it.
    """
    if not review.reportId or review.status not in REVIEWABLE_STATUSES:
        raise InvalidInput("Invalid request data")

    report = db.get_report_with_classroom(review.reportId)
    if report is None:
        raise NotFound("Report not found")

    if report.classroom.professor_id != professor_id:
        raise Forbidden("Forbidden: You cannot review reports for classrooms you don't own")

    # An omitted feedback key keeps whatever feedback is already stored.
    db.set_report_review(report.id, review.status, review.feedback, "feedback" in review.model_fields_set)
    logger.info(f"Report {report.id} {review.status} by professor {professor_id}")
    return f"Report {review.status} successfully"


def submit_report(report_data: report_model.ReportCreate, student_id: int, db: DatabaseService) -> report_model.Report:
    """Creates a pending report for a classroom the student is enrolled in."""
    if db.get_enrollment(student_id, report_data.classroomId) is None:
        raise NotFound("Classroom not found or you are not enrolled in it")

    report = db.add_report({
        "classroom_id": report_data.classroomId,
        "student_id": student_id,
        "title": report_data.title,
        "description": report_data.description,
        "type": report_data.type.value,
        "status": ReportStatus.PENDING.value,
        "submission_url": report_data.submissionUrl,
        "due_date": report_data.dueDate,
    })
    logger.info(f"Report {report.id} submitted by student {student_id} in classroom {report.classroom_id}")
    return to_report_dto(report)
