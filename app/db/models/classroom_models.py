# /app/db/models/classroom_models.py

"""
This module defines the SQLAlchemy ORM models for classrooms and the records
that hang off them: student enrollments, tasks and meetings.

Child rows are NOT configured with ORM cascades. Deleting a classroom is an
explicit, ordered operation performed by the classroom repository inside a
single transaction.
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Classroom(Base):
    """
    A cohort of students under one professor for one OJT program instance.
    """
    __tablename__ = "classrooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    ojt_hours = Column(Integer, nullable=False, default=600)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    join_code = Column(String(32), unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    professor = relationship("User", back_populates="classrooms")
    enrollments = relationship("StudentClassroom", back_populates="classroom")
    reports = relationship("Report", back_populates="classroom")


class StudentClassroom(Base):
    """
    Enrollment of a student in a classroom.

    `progress` is a percentage marker refreshed whenever the student logs hours.
    """
    __tablename__ = "student_classrooms"
    __table_args__ = (UniqueConstraint("student_id", "classroom_id", name="uq_student_classroom"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=False, index=True)
    progress = Column(Integer, nullable=False, default=0)
    joined_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("User", back_populates="enrollments")
    classroom = relationship("Classroom", back_populates="enrollments")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Meeting(Base):
    __tablename__ = "meetings"

    id = Column(Integer, primary_key=True, index=True)
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    meeting_url = Column(String(1000), nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
