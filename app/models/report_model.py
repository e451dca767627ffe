# /app/models/report_model.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..db.models.progress_models import ReportType
from .common_model import blank_to_none


class ReportStudent(BaseModel):
    id: int
    name: str
    email: Optional[str] = None


class Report(BaseModel):
    """The report DTO returned to the professor dashboard."""
    id: int
    title: str
    description: Optional[str] = None
    type: str
    studentId: int
    classroomId: int
    status: str
    submissionUrl: Optional[str] = None
    feedback: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    dueDate: Optional[datetime] = None
    student: Optional[ReportStudent] = None
    submittedBy: str


class ReviewRequest(BaseModel):
    """
    Review payload. Everything is optional at the schema level so the service
    can answer a missing id or a disallowed status with one 400 message.
    """
    reportId: Optional[int] = None
    status: Optional[str] = None
    feedback: Optional[str] = None


class ReportCreate(BaseModel):
    classroomId: int
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: ReportType = ReportType.DAILY
    submissionUrl: Optional[str] = None
    dueDate: Optional[datetime] = None

    @field_validator("dueDate", mode="before")
    @classmethod
    def _blank_due_date(cls, value):
        return blank_to_none(value)
