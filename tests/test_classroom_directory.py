# /tests/test_classroom_directory.py

import pytest

from app.db.base import Classroom, StudentClassroom, TimeEntry, Report, Task, Meeting
from app.services.database_helpers import classroom_repository_sql

from conftest import (
    auth_headers, make_professor, make_student, make_classroom, enroll, log_hours,
    make_report, make_task, make_meeting,
)


@pytest.fixture
def populated(session):
    """A professor owning one fully populated classroom, plus a rival professor."""
    professor = make_professor(session)
    rival = make_professor(session, external_id="prof_2", email="rival@uni.edu")
    classroom = make_classroom(session, professor, name="Batch A", ojt_hours=400)
    student = make_student(session, first_name="Juan", last_name="Dela Cruz")
    enroll(session, student, classroom, progress=25)
    log_hours(session, student, classroom, 8)
    make_report(session, student, classroom)
    make_task(session, classroom)
    make_meeting(session, classroom)
    return {"professor": professor, "rival": rival, "classroom": classroom, "student": student}


def _dependent_counts(session, classroom_id):
    return {
        model.__tablename__: session.query(model).filter(model.classroom_id == classroom_id).count()
        for model in (StudentClassroom, TimeEntry, Report, Task, Meeting)
    }


# --- GET ---

def test_get_returns_classroom_with_students_and_progress(client, populated):
    classroom = populated["classroom"]
    response = client.get(f"/api/admin/companies/classrooms/{classroom.id}", headers=auth_headers(populated["professor"]))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == classroom.id
    assert body["ojtHours"] == 400
    assert body["students"] == [{
        "id": populated["student"].id,
        "name": "Juan Dela Cruz",
        "email": "juan@uni.edu",
        "firstName": "Juan",
        "lastName": "Dela Cruz",
        "progress": 25,
    }]


def test_get_not_owned_is_404(client, populated):
    response = client.get(
        f"/api/admin/companies/classrooms/{populated['classroom'].id}", headers=auth_headers(populated["rival"])
    )
    assert response.status_code == 404


def test_get_missing_is_404(client, populated):
    response = client.get("/api/admin/companies/classrooms/9999", headers=auth_headers(populated["professor"]))
    assert response.status_code == 404


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_non_numeric_id_is_400(client, populated, method):
    kwargs = {"headers": auth_headers(populated["professor"])}
    if method == "put":
        kwargs["json"] = {"name": "x"}
    response = getattr(client, method)("/api/admin/companies/classrooms/abc", **kwargs)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid classroom ID"}


# --- PUT ---

def test_update_applies_fields_and_defaults(client, session, populated):
    classroom = populated["classroom"]
    response = client.put(
        f"/api/admin/companies/classrooms/{classroom.id}",
        json={"name": "Batch A (Revised)", "startDate": "2026-01-05", "endDate": ""},
        headers=auth_headers(populated["professor"]),
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Classroom updated successfully"}

    stored = session.query(Classroom).filter(Classroom.id == classroom.id).one()
    assert stored.name == "Batch A (Revised)"
    assert stored.description == "Batch A description"
    assert str(stored.start_date) == "2026-01-05"
    assert stored.end_date is None
    # Omitted ojtHours / isActive fall back to their defaults.
    assert stored.ojt_hours == 600
    assert stored.is_active is True


def test_update_keeps_explicit_values(client, session, populated):
    classroom = populated["classroom"]
    client.put(
        f"/api/admin/companies/classrooms/{classroom.id}",
        json={"ojtHours": 486, "isActive": False},
        headers=auth_headers(populated["professor"]),
    )
    stored = session.query(Classroom).filter(Classroom.id == classroom.id).one()
    assert stored.ojt_hours == 486
    assert stored.is_active is False


def test_update_by_non_owner_is_404_and_changes_nothing(client, session, populated):
    classroom = populated["classroom"]
    response = client.put(
        f"/api/admin/companies/classrooms/{classroom.id}",
        json={"name": "Hijacked", "ojtHours": 1},
        headers=auth_headers(populated["rival"]),
    )

    assert response.status_code == 404
    stored = session.query(Classroom).filter(Classroom.id == classroom.id).one()
    assert stored.name == "Batch A"
    assert stored.ojt_hours == 400


def test_update_by_student_is_403(client, populated):
    response = client.put(
        f"/api/admin/companies/classrooms/{populated['classroom'].id}",
        json={"name": "Nope"},
        headers=auth_headers(populated["student"]),
    )
    assert response.status_code == 403


@pytest.mark.parametrize("method", ["put", "delete"])
def test_write_with_bad_id_is_400_before_role_check(client, populated, method):
    kwargs = {"headers": auth_headers(populated["student"])}
    if method == "put":
        kwargs["json"] = {"name": "x"}
    response = getattr(client, method)("/api/admin/companies/classrooms/abc", **kwargs)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid classroom ID"}


@pytest.mark.parametrize("method", ["put", "delete"])
def test_write_without_token_is_401_even_with_bad_id(client, populated, method):
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    response = getattr(client, method)("/api/admin/companies/classrooms/abc", **kwargs)
    assert response.status_code == 401


# --- DELETE ---

def test_delete_cascades_every_dependent_record(client, session, populated):
    classroom_id = populated["classroom"].id
    assert all(count == 1 for count in _dependent_counts(session, classroom_id).values())

    response = client.delete(f"/api/admin/companies/classrooms/{classroom_id}", headers=auth_headers(populated["professor"]))

    assert response.status_code == 200
    assert response.json() == {"message": "Classroom deleted successfully"}
    assert all(count == 0 for count in _dependent_counts(session, classroom_id).values())
    assert session.query(Classroom).filter(Classroom.id == classroom_id).count() == 0


def test_delete_by_non_owner_is_404_and_deletes_nothing(client, session, populated):
    classroom_id = populated["classroom"].id
    response = client.delete(f"/api/admin/companies/classrooms/{classroom_id}", headers=auth_headers(populated["rival"]))

    assert response.status_code == 404
    assert session.query(Classroom).filter(Classroom.id == classroom_id).count() == 1
    assert all(count == 1 for count in _dependent_counts(session, classroom_id).values())


def test_delete_by_student_is_403_and_deletes_nothing(client, session, populated):
    classroom_id = populated["classroom"].id
    response = client.delete(f"/api/admin/companies/classrooms/{classroom_id}", headers=auth_headers(populated["student"]))

    assert response.status_code == 403
    assert response.json() == {"message": "Forbidden: Professor access required"}
    assert session.query(Classroom).filter(Classroom.id == classroom_id).count() == 1
    assert all(count == 1 for count in _dependent_counts(session, classroom_id).values())


def test_delete_rolls_back_when_a_cascade_step_fails(db, session, populated, monkeypatch):
    class NotAModel:
        pass

    # Meetings are deleted last; a failure there must undo the earlier steps.
    monkeypatch.setattr(classroom_repository_sql, "Meeting", NotAModel)
    classroom_id = populated["classroom"].id

    with pytest.raises(Exception):
        db.delete_classroom_cascade(classroom_id, populated["professor"].id)

    assert session.query(Classroom).filter(Classroom.id == classroom_id).count() == 1
    counts = _dependent_counts(session, classroom_id)
    assert counts["student_classrooms"] == 1
    assert counts["time_entries"] == 1
    assert counts["reports"] == 1
    assert counts["tasks"] == 1


def test_delete_failure_surfaces_as_500(client, session, populated, monkeypatch):
    class NotAModel:
        pass

    monkeypatch.setattr(classroom_repository_sql, "Meeting", NotAModel)
    classroom_id = populated["classroom"].id

    response = client.delete(f"/api/admin/companies/classrooms/{classroom_id}", headers=auth_headers(populated["professor"]))

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}
    assert session.query(Classroom).filter(Classroom.id == classroom_id).count() == 1


# --- Collection endpoints ---

def test_list_classrooms_includes_student_counts(client, session, populated):
    professor = populated["professor"]
    empty = make_classroom(session, professor, name="Batch B")
    enroll(session, make_student(session, external_id="stu_2", email="b@uni.edu"), populated["classroom"])

    response = client.get("/api/prof/companies/classrooms", headers=auth_headers(professor))

    assert response.status_code == 200
    classrooms = response.json()["classrooms"]
    assert [c["id"] for c in classrooms] == [populated["classroom"].id, empty.id]
    assert classrooms[0]["studentCount"] == 2
    assert classrooms[1]["studentCount"] == 0


def test_list_classrooms_empty_for_new_professor(client, session):
    professor = make_professor(session, external_id="prof_new", email="new@uni.edu")
    response = client.get("/api/prof/companies/classrooms", headers=auth_headers(professor))
    assert response.json() == {"classrooms": []}


def test_create_classroom_defaults_hours_and_issues_join_code(client, session):
    professor = make_professor(session)
    response = client.post(
        "/api/prof/companies/classrooms",
        json={"name": "Summer OJT", "description": "CPE 4A"},
        headers=auth_headers(professor),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["ojtHours"] == 600
    assert body["isActive"] is True
    assert body["professorId"] == professor.id
    assert len(body["joinCode"]) == 8


def test_create_classroom_without_name_is_400(client, session):
    professor = make_professor(session)
    response = client.post("/api/prof/companies/classrooms", json={"description": "x"}, headers=auth_headers(professor))
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request data"}
