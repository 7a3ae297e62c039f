"""Health & Readiness: liveness independent of the database, readiness tied to it."""


async def test_liveness(client_without_store):
    res = await client_without_store.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_not_ready_without_database(client_without_store):
    res = await client_without_store.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
