"""End-to-end tests for the project endpoints."""

import pytest
from fastapi.testclient import TestClient

from projecthub.core.config import get_settings
from projecthub.db.models import Project
from tests.factories import create_project, create_user


@pytest.fixture
def alice(db_session):
    return create_user(db_session, username="alice", roles=["USER"])


@pytest.fixture
def bob(db_session):
    return create_user(db_session, username="bob", roles=["USER"])


@pytest.fixture
def admin(db_session):
    return create_user(db_session, username="root", roles=["ADMIN"])


class TestAuthentication:
    def test_missing_token(self, client: TestClient):
        response = client.get("/api/projects")
        assert response.status_code == 401

    def test_invalid_token(self, client: TestClient):
        response = client.get("/api/projects", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


class TestCreateProject:
    def test_user_creates_owned_project(self, client, alice, auth_headers):
        response = client.post(
            "/api/projects",
            json={"name": "Apollo", "desc": "Moon shot"},
            headers=auth_headers(alice),
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Apollo"
        assert data["owner"]["id"] == alice.id
        assert data["owner"]["username"] == "alice"

    def test_validation_error(self, client, alice, auth_headers):
        response = client.post(
            "/api/projects",
            json={"name": "", "desc": "x"},
            headers=auth_headers(alice),
        )
        assert response.status_code == 422

    def test_roleless_user_forbidden(self, client, db_session, auth_headers):
        nobody = create_user(db_session, username="nobody", roles=[])
        response = client.post(
            "/api/projects",
            json={"name": "Apollo", "desc": "Moon shot"},
            headers=auth_headers(nobody),
        )
        assert response.status_code == 403
        assert db_session.query(Project).count() == 0


class TestListAndRead:
    def test_list_with_pagination(self, client, db_session, alice, bob, auth_headers):
        for owner in (alice, alice, bob):
            create_project(db_session, owner=owner)

        response = client.get("/api/projects?limit=2&offset=0", headers=auth_headers(bob))
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["meta"]["count"] == 3

    def test_read_other_users_project(self, client, db_session, alice, bob, auth_headers):
        project = create_project(db_session, owner=alice, name="Shared")
        response = client.get(f"/api/projects/{project.id}", headers=auth_headers(bob))
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Shared"

    def test_not_found(self, client, alice, auth_headers):
        response = client.get("/api/projects/999", headers=auth_headers(alice))
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestUpdate:
    def test_owner_updates(self, client, db_session, alice, auth_headers):
        project = create_project(db_session, owner=alice, name="Old")
        response = client.patch(
            f"/api/projects/{project.id}",
            json={"name": "New"},
            headers=auth_headers(alice),
        )
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "New"

    def test_non_owner_forbidden(self, client, db_session, alice, bob, auth_headers):
        project = create_project(db_session, owner=alice, name="Old")
        response = client.patch(
            f"/api/projects/{project.id}",
            json={"name": "Hijacked"},
            headers=auth_headers(bob),
        )
        assert response.status_code == 403
        assert "data" not in response.json()
        db_session.refresh(project)
        assert project.name == "Old"

    def test_admin_updates_any(self, client, db_session, alice, admin, auth_headers):
        project = create_project(db_session, owner=alice)
        response = client.patch(
            f"/api/projects/{project.id}",
            json={"desc": "Reviewed"},
            headers=auth_headers(admin),
        )
        assert response.status_code == 200
        assert response.json()["data"]["desc"] == "Reviewed"
        assert response.json()["data"]["owner"]["id"] == alice.id


class TestDelete:
    def test_owner_deletes(self, client, db_session, alice, auth_headers):
        project = create_project(db_session, owner=alice)
        project_id = project.id
        response = client.delete(f"/api/projects/{project_id}", headers=auth_headers(alice))
        assert response.status_code == 204
        assert db_session.query(Project).filter(Project.id == project_id).first() is None

    def test_non_owner_forbidden(self, client, db_session, alice, bob, auth_headers):
        project = create_project(db_session, owner=alice)
        response = client.delete(f"/api/projects/{project.id}", headers=auth_headers(bob))
        assert response.status_code == 403
        assert db_session.query(Project).count() == 1

    def test_admin_deletes_any(self, client, db_session, alice, admin, auth_headers):
        project = create_project(db_session, owner=alice)
        response = client.delete(f"/api/projects/{project.id}", headers=auth_headers(admin))
        assert response.status_code == 204


class TestAccountState:
    def test_inactive_user_rejected(self, client, db_session, auth_headers):
        gone = create_user(db_session, username="gone")
        headers = auth_headers(gone)
        gone.is_active = False
        db_session.flush()

        response = client.post(
            "/api/projects",
            json={"name": "Apollo", "desc": "Moon shot"},
            headers=headers,
        )
        assert response.status_code == 401
        assert db_session.query(Project).count() == 0

    def test_deleted_user_rejected(self, client, db_session, auth_headers):
        gone = create_user(db_session, username="deleted")
        headers = auth_headers(gone)
        db_session.delete(gone)
        db_session.flush()

        response = client.get("/api/projects", headers=headers)
        assert response.status_code == 401

    def test_roles_read_from_user_record(self, client, db_session, alice, auth_headers):
        project = create_project(db_session, owner=alice)
        headers = auth_headers(alice)
        alice.roles = []
        db_session.flush()

        response = client.get(f"/api/projects/{project.id}", headers=headers)
        assert response.status_code == 403


class TestPagination:
    def test_default_limit(self, client, db_session, alice, auth_headers):
        for _ in range(3):
            create_project(db_session, owner=alice)
        response = client.get("/api/projects", headers=auth_headers(alice))
        assert response.status_code == 200
        assert len(response.json()["data"]) == 3

    def test_offset(self, client, db_session, alice, auth_headers):
        projects = [create_project(db_session, owner=alice) for _ in range(3)]
        response = client.get("/api/projects?limit=5&offset=2", headers=auth_headers(alice))
        assert [p["id"] for p in response.json()["data"]] == [projects[2].id]

    def test_limit_above_configured_max(self, client, alice, auth_headers):
        over = get_settings().max_page_limit + 1
        response = client.get(f"/api/projects?limit={over}", headers=auth_headers(alice))
        assert response.status_code == 422

    def test_negative_offset(self, client, alice, auth_headers):
        response = client.get("/api/projects?offset=-1", headers=auth_headers(alice))
        assert response.status_code == 422
