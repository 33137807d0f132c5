"""Client portal routes: client creation, project listing/creation, engineers.

Invariants:
    - The acting client comes from AuthContext (placeholder id 1 by default)
    - Body-supplied clientId/status never reach the store
    - Only "available" engineers are listed
"""

from portal.api.dependencies import get_auth_context
from portal.core.auth_context import AuthContext
from portal.core.domain_types import ClientId
from portal.models import Engineer
from portal.schemas.client_portal import ClientCreate, ProjectCreate


async def test_create_client(client):
    res = await client.post(
        "/api/client",
        json={"name": "Acme", "email": "ops@acme.example.com", "company": "Acme Corp"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["client"]["id"] == 1
    assert body["client"]["company"] == "Acme Corp"
    assert "createdAt" in body["client"]


async def test_create_client_bad_email_is_400(client):
    res = await client.post("/api/client", json={"name": "Acme", "email": "nope"})
    assert res.status_code == 400
    assert res.json()["errors"]


async def test_create_project_forces_client_and_planning(client):
    await client.post("/api/client", json={"name": "Acme", "email": "ops@acme.example.com"})

    res = await client.post(
        "/api/client/projects",
        json={"name": "Bridge retrofit", "clientId": 42, "status": "completed"},
    )

    assert res.status_code == 200
    project = res.json()["project"]
    assert project["clientId"] == 1
    assert project["status"] == "planning"


async def test_create_project_missing_name_is_400(client):
    res = await client.post("/api/client/projects", json={"budget": "10k"})
    assert res.status_code == 400


async def test_create_project_without_client_row_is_500(client):
    res = await client.post("/api/client/projects", json={"name": "Orphan"})
    assert res.status_code == 500
    assert res.json()["message"] == "Failed to create project"


async def test_list_projects_uses_auth_context(app, client, storage):
    acme = await storage.create_client(ClientCreate(name="Acme", email="a@acme.example.com"))
    globex = await storage.create_client(ClientCreate(name="Globex", email="g@globex.example.com"))
    await storage.create_project(ProjectCreate(client_id=acme.id, name="Acme job"))
    await storage.create_project(ProjectCreate(client_id=globex.id, name="Globex job"))
    app.dependency_overrides[get_auth_context] = lambda: AuthContext(
        client_id=ClientId(globex.id),
    )

    res = await client.get("/api/client/projects")

    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Globex job"]


async def test_list_projects_empty(client):
    res = await client.get("/api/client/projects")
    assert res.status_code == 200
    assert res.json() == []


async def test_available_engineers(client, test_db):
    test_db.add_all([
        Engineer(name="Free", email="free@example.com", availability="available"),
        Engineer(name="Booked", email="booked@example.com", availability="busy"),
    ])
    await test_db.commit()

    res = await client.get("/api/engineers/available")

    assert res.status_code == 200
    rows = res.json()
    assert [r["name"] for r in rows] == ["Free"]
    assert rows[0]["availability"] == "available"
