# /app/db/models/user_models.py

"""
SQLAlchemy model for application users.

A User row is created the first time a caller signs in through the identity
provider. The `external_id` column holds the provider's subject claim and is
the only link between a verified token and our internal records.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class UserRole(str, enum.Enum):
    PROFESSOR = "professor"
    STUDENT = "student"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    external_id = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), index=True, nullable=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)

    # NULL until the user completes the role-selection step.
    role = Column(Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    classrooms = relationship("Classroom", back_populates="professor")
    enrollments = relationship("StudentClassroom", back_populates="student")
