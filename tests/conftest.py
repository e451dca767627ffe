# /tests/conftest.py

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.identity import IdentityProviderClient, get_identity_client
from app.db.base import Base, User, UserRole, Classroom, StudentClassroom, Task, Meeting, TimeEntry, Report
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService

TEST_SECRET = "test-identity-secret"


@pytest.fixture
def session():
    """
    A fresh in-memory SQLite database per test. StaticPool keeps the single
    connection alive so every session sees the same tables.
    """
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db_session = TestingSession()
    yield db_session
    db_session.close()
    engine.dispose()


@pytest.fixture
def db(session):
    return DatabaseService(session)


@pytest.fixture
def client(session):
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_client] = lambda: IdentityProviderClient(
        secret=TEST_SECRET, algorithm="HS256", audience=None, issuer=None
    )
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# --- Token Helpers ---

def make_token(subject: str, secret: str = TEST_SECRET, **claims) -> str:
    return jwt.encode({"sub": subject, **claims}, secret, algorithm="HS256")


def auth_headers(user_or_subject, **claims) -> dict:
    subject = user_or_subject.external_id if isinstance(user_or_subject, User) else user_or_subject
    return {"Authorization": f"Bearer {make_token(subject, **claims)}"}


# --- Record Factories ---

def make_user(session, external_id, role=None, email=None, first_name=None, last_name=None) -> User:
    user = User(external_id=external_id, role=role, email=email, first_name=first_name, last_name=last_name)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_professor(session, external_id="prof_1", email="prof@uni.edu") -> User:
    return make_user(session, external_id, role=UserRole.PROFESSOR, email=email, first_name="Paula", last_name="Reyes")


def make_student(session, external_id="stu_1", email="juan@uni.edu", first_name=None, last_name=None) -> User:
    return make_user(session, external_id, role=UserRole.STUDENT, email=email, first_name=first_name, last_name=last_name)


def make_classroom(session, professor, name="OJT Batch A", ojt_hours=600, join_code=None, is_active=True) -> Classroom:
    classroom = Classroom(
        name=name,
        description=f"{name} description",
        professor_id=professor.id,
        ojt_hours=ojt_hours,
        is_active=is_active,
        join_code=join_code or f"CODE{name.replace(' ', '').upper()[:12]}",
    )
    session.add(classroom)
    session.commit()
    session.refresh(classroom)
    return classroom


def enroll(session, student, classroom, joined_at=None, progress=0) -> StudentClassroom:
    enrollment = StudentClassroom(student_id=student.id, classroom_id=classroom.id, progress=progress)
    if joined_at is not None:
        enrollment.joined_at = joined_at
    session.add(enrollment)
    session.commit()
    session.refresh(enrollment)
    return enrollment


def log_hours(session, student, classroom, hours, entry_date=None) -> TimeEntry:
    entry = TimeEntry(
        student_id=student.id,
        classroom_id=classroom.id,
        entry_date=entry_date or datetime(2026, 3, 2).date(),
        hours=hours,
    )
    session.add(entry)
    session.commit()
    return entry


def make_report(session, student, classroom, title="Day 1 Report", status="pending", report_type="daily") -> Report:
    report = Report(
        classroom_id=classroom.id,
        student_id=student.id,
        title=title,
        status=status,
        type=report_type,
    )
    session.add(report)
    session.commit()
    session.refresh(report)
    return report


def make_task(session, classroom, title="Submit MOA") -> Task:
    task = Task(classroom_id=classroom.id, title=title)
    session.add(task)
    session.commit()
    return task


def make_meeting(session, classroom, title="Orientation") -> Meeting:
    meeting = Meeting(classroom_id=classroom.id, title=title, meeting_url="https://meet.example.com/abc")
    session.add(meeting)
    session.commit()
    return meeting
