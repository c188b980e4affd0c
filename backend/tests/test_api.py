"""API tests using FastAPI TestClient."""
import pytest
from fastapi.testclient import TestClient

from projtrack.container import get_store
from projtrack.main import app


def _first_project_id(client):
    return client.get("/api/projects").json()[0]["id"]


def _register(client, **body):
    payload = {"name": "Aluno", **body}
    return client.post("/api/auth/register", json=payload)


# ------------------------------------------------------------------
# Health + semester
# ------------------------------------------------------------------
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_semester_progress(client):
    data = client.get("/api/semester/progress").json()
    assert data["totalWeeks"] == 11
    assert 0 <= data["currentWeek"] <= 11
    assert 0 <= data["progress"] <= 100


# ------------------------------------------------------------------
# Projects + schedule
# ------------------------------------------------------------------
def test_list_projects(client):
    resp = client.get("/api/projects")
    assert resp.status_code == 200
    projects = resp.json()
    assert len(projects) == 8
    assert {"id", "title", "theme", "architecture", "createdAt"} <= set(projects[0])


def test_get_project(client):
    project_id = _first_project_id(client)
    resp = client.get(f"/api/projects/{project_id}")
    assert resp.status_code == 200
    assert resp.json()["id"] == project_id


def test_get_project_not_found(client):
    resp = client.get("/api/projects/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Project not found"}


def test_create_project_round_trip(client):
    body = {
        "title": "Sistema de Biblioteca",
        "description": "Empréstimos",
        "theme": 9,
        "context": "Escola",
        "problem": "Controle manual",
        "architecture": ["Django", "PostgreSQL"],
        "technologies": ["django"],
        "modules": ["Acervo"],
        "deliverables": ["Protótipo"],
    }
    resp = client.post("/api/projects", json=body)
    assert resp.status_code == 201
    created = resp.json()

    fetched = client.get(f"/api/projects/{created['id']}").json()
    assert fetched["theme"] == 9
    assert fetched["title"] == "Sistema de Biblioteca"
    assert fetched["architecture"] == ["Django", "PostgreSQL"]


def test_create_project_validation_error(client):
    resp = client.post("/api/projects", json={"title": "Incompleto"})
    assert resp.status_code == 400
    data = resp.json()
    assert "message" in data
    fields = {e["field"] for e in data["errors"]}
    assert {"description", "theme"} <= fields


def test_project_schedule_is_ascending(client):
    project_id = _first_project_id(client)
    schedule = client.get(f"/api/projects/{project_id}/schedule").json()
    weeks = [s["weekNumber"] for s in schedule]
    assert weeks == sorted(weeks) == list(range(1, 12))
    assert [s["status"] for s in schedule[:3]] == ["completed", "current", "pending"]


def test_schedule_for_unknown_project_is_empty(client):
    resp = client.get("/api/projects/unknown/schedule")
    assert resp.status_code == 200
    assert resp.json() == []


def test_update_schedule_status(client):
    project_id = _first_project_id(client)
    week = client.get(f"/api/projects/{project_id}/schedule").json()[2]

    resp = client.patch(f"/api/schedule/{week['id']}/status", json={"status": "current"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "current"
    assert client.get(f"/api/schedule/{week['id']}").json()["status"] == "current"


def test_update_schedule_status_invalid(client):
    project_id = _first_project_id(client)
    week = client.get(f"/api/projects/{project_id}/schedule").json()[2]

    resp = client.patch(f"/api/schedule/{week['id']}/status", json={"status": "done"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid status"
    assert client.get(f"/api/schedule/{week['id']}").json()["status"] == "pending"


def test_update_schedule_status_not_found(client):
    resp = client.patch("/api/schedule/missing/status", json={"status": "completed"})
    assert resp.status_code == 404


def test_create_schedule_item_without_project(client):
    resp = client.post("/api/schedule", json={
        "weekNumber": 12,
        "title": "Semana extra",
        "startDate": "2025-12-09T00:00:00Z",
        "endDate": "2025-12-15T00:00:00Z",
        "tasks": ["Revisão"],
        "deliverable": "Relatório",
        "evaluationCriteria": ["Clareza"],
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["projectId"] is None
    assert data["status"] == "pending"


# ------------------------------------------------------------------
# Professors + notifications
# ------------------------------------------------------------------
def test_list_and_get_professors(client):
    professors = client.get("/api/professors").json()
    assert len(professors) == 3
    resp = client.get(f"/api/professors/{professors[0]['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Gabriel Eduardo"
    assert client.get("/api/professors/missing").status_code == 404


def test_mark_notification_read_is_idempotent(client):
    notification = client.get("/api/notifications").json()[0]
    assert notification["isRead"] is False

    for _ in range(2):
        resp = client.patch(f"/api/notifications/{notification['id']}/read")
        assert resp.status_code == 200
        assert resp.json()["isRead"] is True


def test_mark_notification_read_not_found(client):
    resp = client.patch("/api/notifications/missing/read")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Notification not found"}


def test_new_notification_listed_first(client):
    resp = client.post("/api/notifications", json={
        "title": "Aviso", "message": "Aula cancelada", "type": "announcement",
    })
    assert resp.status_code == 201
    assert resp.json()["priority"] == "medium"
    assert client.get("/api/notifications").json()[0]["id"] == resp.json()["id"]


# ------------------------------------------------------------------
# Auth
# ------------------------------------------------------------------
def test_login_success(client):
    resp = client.post("/api/auth/login", json={"username": "professor", "password": "4731v8"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["user"]["username"] == "professor"
    assert data["user"]["type"] == "professor"
    assert "password" not in data["user"]
    assert data["token"]


def test_login_bad_password(client):
    resp = client.post("/api/auth/login", json={"username": "professor", "password": "wrong"})
    assert resp.status_code == 401
    assert "message" in resp.json()


def test_login_unknown_user(client):
    resp = client.post("/api/auth/login", json={"username": "ghost", "password": "4731v8"})
    assert resp.status_code == 401


@pytest.mark.parametrize("body", [{}, {"username": "professor"}, {"password": "4731v8"}])
def test_login_missing_fields(client, body):
    resp = client.post("/api/auth/login", json=body)
    assert resp.status_code == 400
    assert resp.json()["errors"]


def test_me_with_token(client):
    token = client.post(
        "/api/auth/login", json={"username": "professor", "password": "4731v8"}
    ).json()["token"]
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["user"]["username"] == "professor"


def test_me_without_token(client):
    assert client.get("/api/auth/me").status_code == 401


def test_me_with_bad_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_register_student(client):
    resp = _register(client, name="Maria", githubProfile="https://github.com/maria")
    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["type"] == "student"
    assert user["githubProfile"] == "https://github.com/maria"
    assert user["username"] is None
    assert "password" not in user


def test_register_forces_student_type(client):
    resp = _register(client, name="Intruso", type="professor")
    assert resp.status_code == 201
    assert resp.json()["user"]["type"] == "student"


def test_register_duplicate_username_conflicts(client):
    first = _register(client, name="Ana", username="ana", password="segredo")
    assert first.status_code == 201

    resp = _register(client, name="Outra Ana", username="ana", password="x")
    assert resp.status_code == 409
    assert "message" in resp.json()

    users = [u for u in client.get("/api/users").json() if u["username"] == "ana"]
    assert len(users) == 1
    assert users[0]["name"] == "Ana"

    login = client.post("/api/auth/login", json={"username": "ana", "password": "segredo"})
    assert login.status_code == 200


def test_register_duplicate_of_professor_username(client):
    resp = _register(client, name="Fake", username="professor", password="x")
    assert resp.status_code == 409


def test_register_validation_error(client):
    resp = client.post("/api/auth/register", json={"githubProfile": "x"})
    assert resp.status_code == 400
    assert any(e["field"] == "name" for e in resp.json()["errors"])


@pytest.mark.parametrize("password", ["é" * 40, "é" * 36 + "a"])
def test_register_password_over_72_bytes_is_rejected(client, password):
    resp = _register(client, name="Ana", username="ana", password=password)
    assert resp.status_code == 400
    assert [e["field"] for e in resp.json()["errors"]] == ["password"]
    assert len(client.get("/api/users").json()) == 1


def test_register_multibyte_password_then_login(client):
    password = "é" * 36
    assert _register(client, name="Ana", username="ana", password=password).status_code == 201
    ok = client.post("/api/auth/login", json={"username": "ana", "password": password})
    assert ok.status_code == 200
    near = client.post("/api/auth/login", json={"username": "ana", "password": "é" * 35 + "e"})
    assert near.status_code == 401


def test_list_users_strips_passwords(client):
    _register(client, name="Ana", username="ana", password="segredo")
    users = client.get("/api/users").json()
    assert len(users) == 2
    assert all("password" not in u for u in users)


def test_get_user(client):
    user_id = _register(client, name="Ana").json()["user"]["id"]
    assert client.get(f"/api/users/{user_id}").json()["name"] == "Ana"
    assert client.get("/api/users/missing").status_code == 404


# ------------------------------------------------------------------
# Groups
# ------------------------------------------------------------------
def test_create_group_then_list_for_project(client):
    project_id = _first_project_id(client)
    leader_id = _register(client, name="Líder").json()["user"]["id"]

    resp = client.post("/api/groups", json={"name": "Team A", "projectId": project_id, "leaderId": leader_id})
    assert resp.status_code == 201

    groups = client.get(f"/api/projects/{project_id}/groups").json()
    assert len(groups) == 1
    assert groups[0]["name"] == "Team A"
    assert groups[0]["status"] == "pending"
    assert groups[0]["leaderId"] == leader_id


def test_create_group_validation_error(client):
    resp = client.post("/api/groups", json={"projectId": "p1"})
    assert resp.status_code == 400


def test_group_with_unknown_project_is_accepted(client):
    resp = client.post("/api/groups", json={"name": "Órfão", "projectId": "no-such-project"})
    assert resp.status_code == 201
    assert resp.json()["projectId"] == "no-such-project"


def test_approve_and_reject_group(client):
    group_id = client.post("/api/groups", json={"name": "Team A"}).json()["id"]

    resp = client.patch(f"/api/groups/{group_id}/status", json={"status": "approved"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "approved"
    assert client.get(f"/api/groups/{group_id}").json()["status"] == "approved"


def test_group_status_invalid_value_leaves_status(client):
    group_id = client.post("/api/groups", json={"name": "Team A"}).json()["id"]

    resp = client.patch(f"/api/groups/{group_id}/status", json={"status": "archived"})
    assert resp.status_code == 400
    assert client.get(f"/api/groups/{group_id}").json()["status"] == "pending"


def test_group_status_not_found(client):
    resp = client.patch("/api/groups/missing/status", json={"status": "approved"})
    assert resp.status_code == 404


def test_list_groups(client):
    client.post("/api/groups", json={"name": "Team A"})
    client.post("/api/groups", json={"name": "Team B"})
    assert [g["name"] for g in client.get("/api/groups").json()] == ["Team A", "Team B"]


# ------------------------------------------------------------------
# Members
# ------------------------------------------------------------------
def test_add_list_remove_member(client):
    group_id = client.post("/api/groups", json={"name": "Team A"}).json()["id"]
    user_id = _register(client, name="Ana").json()["user"]["id"]

    resp = client.post(f"/api/groups/{group_id}/members", json={"userId": user_id})
    assert resp.status_code == 201
    assert resp.json()["groupId"] == group_id
    assert len(client.get(f"/api/groups/{group_id}/members").json()) == 1

    resp = client.delete(f"/api/groups/{group_id}/members/{user_id}")
    assert resp.status_code == 204
    assert client.get(f"/api/groups/{group_id}/members").json() == []


def test_remove_missing_member(client):
    group_id = client.post("/api/groups", json={"name": "Team A"}).json()["id"]
    client.post(f"/api/groups/{group_id}/members", json={"userId": "u1"})

    resp = client.delete(f"/api/groups/{group_id}/members/u2")
    assert resp.status_code == 404
    assert len(client.get(f"/api/groups/{group_id}/members").json()) == 1


def test_add_member_requires_user_id(client):
    resp = client.post("/api/groups/g1/members", json={})
    assert resp.status_code == 400


# ------------------------------------------------------------------
# Interests
# ------------------------------------------------------------------
def test_record_and_list_interests(client):
    project_id = _first_project_id(client)
    user_id = _register(client, name="Ana").json()["user"]["id"]

    resp = client.post("/api/interests", json={"userId": user_id, "projectId": project_id, "message": "Tenho interesse"})
    assert resp.status_code == 201
    assert resp.json()["message"] == "Tenho interesse"

    assert len(client.get(f"/api/projects/{project_id}/interests").json()) == 1
    assert len(client.get(f"/api/users/{user_id}/interests").json()) == 1


def test_interest_validation_error(client):
    resp = client.post("/api/interests", json={"userId": "u1"})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "projectId"


# ------------------------------------------------------------------
# Completions
# ------------------------------------------------------------------
def test_completion_flow(client):
    project_id = _first_project_id(client)
    schedule_id = client.get(f"/api/projects/{project_id}/schedule").json()[0]["id"]
    group_id = client.post("/api/groups", json={"name": "Team A", "projectId": project_id}).json()["id"]
    check_url = f"/api/schedule/{schedule_id}/groups/{group_id}/completed"

    assert client.get(check_url).json() == {"completed": False}

    resp = client.post("/api/completions", json={"scheduleId": schedule_id, "groupId": group_id})
    assert resp.status_code == 201
    assert resp.json()["notes"] is None

    assert client.get(check_url).json() == {"completed": True}
    assert len(client.get(f"/api/groups/{group_id}/completions").json()) == 1


def test_completion_validation_error(client):
    resp = client.post("/api/completions", json={"notes": "feito"})
    assert resp.status_code == 400


# ------------------------------------------------------------------
# Error mapping
# ------------------------------------------------------------------
def test_unknown_route_has_message(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "message" in resp.json()


def test_unexpected_error_is_generic_500(store):
    class BrokenStore:
        def get_projects(self):
            raise RuntimeError("secret internals")

    app.dependency_overrides[get_store] = lambda: BrokenStore()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        resp = client.get("/api/projects")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
