# /app/models/progress_model.py

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ProgressSnapshot(BaseModel):
    """Derived OJT progress of one student in one classroom."""
    id: int = Field(..., description="The student's id (kept for dashboard compatibility).")
    studentId: int
    classroomId: int
    completedHours: float
    requiredHours: int
    progressPercentage: int


class StudentProgressRow(BaseModel):
    """One row of the professor's student list."""
    id: int
    name: str
    email: Optional[str] = None
    classroom: str
    classroomId: int
    progress: int
    completedHours: float
    requiredHours: int


class StudentProgressList(BaseModel):
    students: List[StudentProgressRow]


class TimeEntryCreate(BaseModel):
    classroomId: int
    entryDate: date
    hours: float = Field(..., gt=0, le=24)
    description: Optional[str] = None


class TimeEntry(BaseModel):
    id: int
    studentId: int
    classroomId: int
    entryDate: date
    hours: float
    description: Optional[str] = None
    createdAt: Optional[datetime] = None
    progress: ProgressSnapshot


class JoinClassroomRequest(BaseModel):
    joinCode: str = Field(..., min_length=1)


class StudentClassroom(BaseModel):
    """A classroom as seen from the enrolled student's side."""
    id: int
    name: str
    description: Optional[str] = None
    ojtHours: int
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    isActive: bool
    progress: ProgressSnapshot
