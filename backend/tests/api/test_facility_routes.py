"""Facility routes — HTTP status mapping and JSON shape over a SQLite-backed repository.

Invariants:
    - NotFound → 404, NotUnique/BadRequest/validation → 400, ServerError → 500
    - Relations appear in JSON only when requested
"""

import pytest
from httpx import ASGITransport, AsyncClient

import checkin.infrastructure.database as database
from checkin.main import app


@pytest.fixture
async def client(db_manager, monkeypatch):
    """API client whose storage client is the per-test SQLite manager."""
    monkeypatch.setattr(database, "db_manager", db_manager)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def _create(client, **body) -> dict:
    resp = await client.post("/api/v1/facilities", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_returns_201_without_relations(client):
    body = await _create(client, name="Portland", city="Portland")
    assert body["id"] > 0
    assert body["name"] == "Portland"
    assert body["active"] is True
    assert "bans" not in body


@pytest.mark.asyncio
async def test_create_duplicate_returns_400_not_unique(client):
    await _create(client, name="Portland")
    resp = await client.post("/api/v1/facilities", json={"name": "Portland"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "NOT_UNIQUE"


@pytest.mark.asyncio
async def test_create_invalid_body_returns_400(client):
    resp = await client.post("/api/v1/facilities", json={"name": ""})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_get_by_id_and_missing(client):
    created = await _create(client, name="Portland")
    resp = await client.get(f"/api/v1/facilities/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Portland"

    missing = await client.get("/api/v1/facilities/9999")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_get_by_exact_name(client):
    await _create(client, name="Portland")
    assert (await client.get("/api/v1/facilities/exact/Portland")).status_code == 200
    assert (await client.get("/api/v1/facilities/exact/portland")).status_code == 404


@pytest.mark.asyncio
async def test_list_filters_and_includes(client):
    await _create(client, name="Cabin")
    await _create(client, name="Harbor", active=False)

    resp = await client.get(
        "/api/v1/facilities", params={"active": "true", "withBans": "true"},
    )
    assert resp.status_code == 200
    rows = resp.json()
    assert [r["name"] for r in rows] == ["Cabin"]
    assert rows[0]["bans"] == []
    assert "templates" not in rows[0]

    plain = (await client.get("/api/v1/facilities")).json()
    assert [r["name"] for r in plain] == ["Cabin", "Harbor"]
    assert all("bans" not in r for r in plain)


@pytest.mark.asyncio
async def test_update_ignores_body_id(client):
    portland = await _create(client, name="Portland")
    salem = await _create(client, name="Salem")

    resp = await client.put(
        f"/api/v1/facilities/{portland['id']}",
        json={"id": salem["id"], "city": "Gresham"},
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == portland["id"]
    assert resp.json()["city"] == "Gresham"


@pytest.mark.asyncio
async def test_update_missing_returns_404(client):
    resp = await client.put("/api/v1/facilities/9999", json={"city": "Nowhere"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_returns_removed_row(client):
    created = await _create(client, name="Portland")
    resp = await client.delete(f"/api/v1/facilities/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Portland"
    assert (await client.get(f"/api/v1/facilities/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_storage_failure_returns_500_without_details(client, drop_tables):
    await drop_tables()
    resp = await client.get("/api/v1/facilities")
    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["code"] == "SERVER_ERROR"
    assert "no such table" not in error["message"]


@pytest.mark.asyncio
async def test_health_probes(client):
    assert (await client.get("/api/v1/health/")).status_code == 200
    ready = await client.get("/api/v1/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["database"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    ready = await client.get("/api/v1/health/ready")
    assert ready.status_code == 503
    assert ready.json()["reason"] == "database_unavailable"


@pytest.mark.asyncio
async def test_not_found_is_logged_with_repository_operation(client, caplog):
    with caplog.at_level("WARNING", logger="checkin.api.error_handlers"):
        resp = await client.delete("/api/v1/facilities/9999")
    assert resp.status_code == 404
    [record] = [r for r in caplog.records if r.name == "checkin.api.error_handlers"]
    assert record.operation == "FacilityRepository.delete"
    assert record.path == "/api/v1/facilities/9999"
