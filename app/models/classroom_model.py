# /app/models/classroom_model.py

# --- Core Imports ---
from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .common_model import blank_to_none

# --- Request Models ---

class ClassroomCreate(BaseModel):
    """The payload a professor sends to open a new classroom."""
    name: str = Field(..., min_length=1, description="Display name of the classroom.")
    description: Optional[str] = Field(default=None)
    startDate: Optional[date] = Field(default=None)
    endDate: Optional[date] = Field(default=None)
    ojtHours: Optional[int] = Field(default=None, ge=0, description="Required OJT hours. Falls back to 600.")
    isActive: Optional[bool] = Field(default=None)

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def _blank_dates(cls, value):
        return blank_to_none(value)


class ClassroomUpdate(BaseModel):
    """
    The PUT payload. name/description are left untouched when omitted; the
    remaining fields fall back to their stored defaults (dates cleared,
    600 hours, active).
    """
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None)
    startDate: Optional[date] = Field(default=None)
    endDate: Optional[date] = Field(default=None)
    ojtHours: Optional[int] = Field(default=None, ge=0)
    isActive: Optional[bool] = Field(default=None)

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def _blank_dates(cls, value):
        return blank_to_none(value)


# --- Response Models ---

class Classroom(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    professorId: int
    ojtHours: int
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    isActive: bool
    joinCode: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class ClassroomSummary(Classroom):
    studentCount: int = Field(default=0, description="Number of students enrolled in the classroom.")


class ClassroomListResponse(BaseModel):
    classrooms: List[ClassroomSummary]


class ClassroomStudent(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    progress: int = Field(default=0, description="Stored enrollment progress marker (percentage).")


class ClassroomDetails(Classroom):
    students: List[ClassroomStudent] = Field(default_factory=list)
