# /tests/test_view_composition.py

import pytest
from unittest.mock import MagicMock

from app.client.ojt_api_client import ApiError, OjtApiClient
from app.client.view_composer import ViewComposer
from app.db.models.user_models import UserRole
from app.services.view_service import ViewState, compose_view

from conftest import auth_headers, make_professor, make_user


@pytest.mark.parametrize("path, loaded, role, expected", [
    ("/", False, None, ViewState.RESOLVING),
    ("/", True, UserRole.PROFESSOR, ViewState.PROFESSOR),
    ("/", True, UserRole.STUDENT, ViewState.STUDENT),
    ("/", True, None, ViewState.UNASSIGNED),
    ("/role-selection", False, None, ViewState.ROLE_SELECTION),
    ("/role-selection", True, UserRole.PROFESSOR, ViewState.ROLE_SELECTION),
])
def test_compose_view(path, loaded, role, expected):
    assert compose_view(path=path, role_loaded=loaded, role=role).view == expected.value


def test_unassigned_view_redirects_to_role_selection():
    view = compose_view(path="/students", role_loaded=True, role=None)
    assert view.redirect == "/role-selection"


# --- client-side composer ---

def test_composer_resolves_once_and_never_returns_to_resolving():
    api = MagicMock(spec=OjtApiClient)
    api.get_profile.return_value = {"id": 1, "role": "professor"}
    composer = ViewComposer(api, path="/")

    assert composer.state == ViewState.RESOLVING
    composer.resolve()
    assert composer.state == ViewState.PROFESSOR

    api.get_profile.return_value = {"id": 1, "role": None}
    composer.resolve()
    assert composer.state == ViewState.PROFESSOR
    api.get_profile.assert_called_once()


def test_composer_on_role_selection_page_skips_resolution():
    api = MagicMock(spec=OjtApiClient)
    composer = ViewComposer(api, path="/role-selection")

    assert composer.resolve().view == ViewState.ROLE_SELECTION.value
    api.get_profile.assert_not_called()


def test_composer_stays_resolving_when_profile_fetch_fails():
    api = MagicMock(spec=OjtApiClient)
    api.get_profile.side_effect = ApiError(401, "Unauthorized")
    composer = ViewComposer(api, path="/")

    composer.resolve()

    assert composer.state == ViewState.RESOLVING


# --- /api/users ---

def test_first_sign_in_registers_user_without_role(client):
    headers = auth_headers("idp|new", email="neo@uni.edu", given_name="Neo", family_name="Lim")
    response = client.get("/api/users/me", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["role"] is None
    assert body["name"] == "Neo Lim"

    view = client.get("/api/users/me/view", params={"path": "/"}, headers=headers).json()
    assert view == {"view": "unassigned", "role": None, "redirect": "/role-selection"}


def test_role_selection_sets_role_once(client):
    headers = auth_headers("idp|picker", email="pick@uni.edu")

    first = client.post("/api/users/role-selection", json={"role": "student"}, headers=headers)
    assert first.status_code == 200
    assert first.json()["role"] == "student"

    again = client.post("/api/users/role-selection", json={"role": "professor"}, headers=headers)
    assert again.status_code == 400
    assert again.json() == {"message": "Role has already been selected"}

    view = client.get("/api/users/me/view", headers=headers).json()
    assert view["view"] == "student"


def test_role_selection_rejects_unknown_role(client):
    response = client.post("/api/users/role-selection", json={"role": "admin"}, headers=auth_headers("idp|x"))
    assert response.status_code == 400


def test_view_for_professor(client, session):
    professor = make_professor(session)
    response = client.get("/api/users/me/view", params={"path": "/students"}, headers=auth_headers(professor))
    assert response.json()["view"] == "professor"


def test_view_on_role_selection_route_for_unknown_user(client, session):
    make_user(session, "idp|pending")
    response = client.get(
        "/api/users/me/view", params={"path": "/role-selection"}, headers=auth_headers("idp|pending")
    )
    assert response.json()["view"] == "role_selection"


def test_user_routes_require_a_token(client):
    assert client.get("/api/users/me").status_code == 401
